"""Input acquisition for the command line front end.

Resolves an input argument into text: an existing file path is read from
disk, any other string is taken literally, and no argument at all means
standard input. Stdin is read with a bounded retry so a slow producer at
the other end of a pipe is given time to write.

Usage:
    from columnizer.input_reader import ReadRetryConfig, read_input

    text = read_input("data.txt")
    text = read_input(None, ReadRetryConfig(max_attempts=1))

Environment Variables:
    COLUMNIZER_READ_ATTEMPTS: Max stdin read attempts (default: 5)
    COLUMNIZER_READ_DELAY_MS: Delay between attempts in ms (default: 500)
"""

import logging
import os
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import BinaryInputError, InputReadError
from .trace import trace

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read an integer setting from the environment.

    Raises:
        InputReadError: If the variable is set but not an integer.
    """
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise InputReadError(f"Invalid {name}={value!r}: expected an integer") from None


@dataclass
class ReadRetryConfig:
    """Configuration for stdin read retries."""
    max_attempts: int = field(default_factory=lambda: _env_int("COLUMNIZER_READ_ATTEMPTS", 5))
    delay_ms: int = field(default_factory=lambda: _env_int("COLUMNIZER_READ_DELAY_MS", 500))


def decode(data: bytes, source: str) -> str:
    """Decode input bytes as UTF-8.

    Raises:
        BinaryInputError: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise BinaryInputError(source, len(data)) from None


def read_stdin(retry: Optional[ReadRetryConfig] = None, stream: Optional[BinaryIO] = None) -> bytes:
    """Read all of stdin, retrying while it yields nothing.

    Args:
        retry: Attempt count and delay; defaults from the environment.
        stream: Binary stream to read; defaults to sys.stdin.buffer.

    Returns:
        The non-empty bytes read.

    Raises:
        InputReadError: If every attempt came back empty.
    """
    retry = retry or ReadRetryConfig()
    stream = stream or sys.stdin.buffer
    attempts = max(retry.max_attempts, 1)

    for attempt in range(1, attempts + 1):
        data = stream.read()
        if data:
            return data
        logger.debug("stdin empty (attempt %d/%d)", attempt, attempts)
        trace("InputReader", f"stdin empty, attempt {attempt}/{attempts}")
        if attempt < attempts:
            time.sleep(retry.delay_ms / 1000.0)

    raise InputReadError(f"Failed to read input from stdin after {attempts} attempts")


def read_input(
    source: Optional[str] = None,
    retry: Optional[ReadRetryConfig] = None,
    stream: Optional[BinaryIO] = None,
) -> str:
    """Resolve an input argument into text.

    Args:
        source: File path or literal text; None reads stdin.
        retry: Stdin retry settings.
        stream: Stdin replacement, for callers that already hold a stream.

    Returns:
        The input text.

    Raises:
        InputReadError: If stdin yields nothing or the file can't be read.
        BinaryInputError: If the input is not UTF-8 text.
    """
    if source is None:
        return decode(read_stdin(retry, stream), "stdin")

    path = Path(source)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        # Literal text that can't be a path (too long, NUL bytes)
        is_file = False

    if is_file:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise InputReadError(f"Error reading file '{path}': {e}") from e
        logger.debug("Read %d bytes from %s", len(data), path)
        return decode(data, str(path))

    return source
