"""Trace file channel for the formatting pipeline.

Pipeline stages append short, timestamped lines to a trace file so a
misbehaving table can be diagnosed without turning on DEBUG logging for
the whole process:

    [12:03:44.512] [TableBuilder] parsed 12 rows x 4 columns
    [12:03:44.513] [TableBuilder] widths=[6, 5] numeric=[False, True]

Usage:
    from columnizer.trace import trace

    trace("InputReader", "stdin empty, attempt 1/5")
    trace("InputReader", "decode failed", include_traceback=True)

Environment Variables:
    COLUMNIZER_TRACE_LOG: Trace file path. Tracing is off unless this is
        set to a non-empty path.
"""

import os
import traceback
from datetime import datetime
from pathlib import Path
from typing import List, Optional

TRACE_ENV_VAR = "COLUMNIZER_TRACE_LOG"


def resolve_trace_path() -> Optional[str]:
    """Trace file from COLUMNIZER_TRACE_LOG, or None when unset or empty."""
    return os.environ.get(TRACE_ENV_VAR) or None


def _trace_lines(component: str, msg: str, include_traceback: bool) -> List[str]:
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    prefix = f"[{stamp}] [{component}]"
    lines = [f"{prefix} {msg}\n"]
    if include_traceback:
        tb = traceback.format_exc()
        # format_exc() outside an except block
        if tb.strip() != "NoneType: None":
            lines.append(f"{prefix} Traceback:\n{tb}\n")
    return lines


def trace_write(
    component: str,
    msg: str,
    trace_path: Optional[str],
    *,
    include_traceback: bool = False,
) -> None:
    """Append a trace line to trace_path.

    Does nothing when trace_path is None. I/O failures are ignored so a
    broken trace file never breaks table output.

    Args:
        component: Pipeline stage name for the line prefix.
        msg: Message to write.
        trace_path: File to append to.
        include_traceback: Also write the exception being handled.
    """
    if not trace_path:
        return
    target = Path(trace_path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("a", encoding="utf-8") as f:
            f.writelines(_trace_lines(component, msg, include_traceback))
    except OSError:
        pass


def trace(component: str, msg: str, *, include_traceback: bool = False) -> None:
    """Append a trace line to the configured columnizer trace file."""
    trace_write(component, msg, resolve_trace_path(),
                include_traceback=include_traceback)
