from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional

from .. import PROGRAM_NAME

ROOT_LOGGER = "mermaid.batch"

# ---------- small helpers ----------

def preview(s: str | bytes | Any, n: int = 300) -> str:
    try:
        if isinstance(s, bytes):
            s = s.decode("utf-8", "replace")
        s = str(s)
    except Exception:
        return "<unprintable>"
    s = s.strip()
    return s if len(s) <= n else (s[: n - 20] + "... <truncated>")

# ---------- logging setup ----------

_STD_ATTRS = {
    "name","msg","args","levelname","levelno","pathname","filename","module","exc_info",
    "exc_text","stack_info","lineno","funcName","created","msecs","relativeCreated",
    "thread","threadName","processName","process","message","asctime","taskName",
}

class TaggedFormatter(logging.Formatter):
    """
    Format: "[mermaid-cli-batch] message | {json of extras}"
    """
    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()

        extras = {k: v for k, v in record.__dict__.items() if k not in _STD_ATTRS}

        base = f"[{PROGRAM_NAME}] {record.message}"
        if extras:
            try:
                j = json.dumps(extras, ensure_ascii=False, default=str)
            except Exception:
                j = '{"_format_error":"<unserializable extras>"}'
            base = f"{base} | {j}"
        if record.exc_info:
            base = f"{base}\n{self.formatException(record.exc_info)}"
        return base

def setup_logging(verbose: bool = False, level: Optional[str] = None) -> logging.Logger:
    """
    Route the package loggers to stdout. Safe to call once per run; a
    handler from an earlier call is swapped so it always targets the
    current sys.stdout.
    """
    if level:
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = logging.INFO if verbose else logging.WARNING

    log = logging.getLogger(ROOT_LOGGER)
    for h in list(log.handlers):
        if getattr(h, "_mermaid_batch_handler", False):
            log.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(TaggedFormatter())
    handler._mermaid_batch_handler = True  # type: ignore[attr-defined]
    log.addHandler(handler)
    log.setLevel(lvl)
    return log
