# src/mermaid_cli_batch/engine/locator.py
from __future__ import annotations

import glob
import logging
from pathlib import Path
from typing import Iterable, List, Optional

log = logging.getLogger("mermaid.batch.engine.locator")

_GLOB_CHARS = ("*", "?", "[")

def _is_pattern(value: str) -> bool:
    return any(ch in value for ch in _GLOB_CHARS)

def expand_inputs(values: Iterable[str]) -> List[str]:
    """
    Expand glob patterns the shell left untouched (quoted, or Windows).
    Plain paths, and existing files whose names merely contain glob
    characters, pass through as-is; a pattern matching nothing is kept
    literally so the later read reports the missing file.
    """
    out: List[str] = []
    for value in values:
        if not _is_pattern(value) or Path(value).exists():
            out.append(value)
            continue
        matches = sorted(glob.glob(value, recursive=True))
        log.debug("input.glob", extra={"pattern": value, "matches": len(matches)})
        out.extend(matches or [value])
    return out

def resolve_output_base(input_path: str | Path, output_dir: Optional[str | Path] = None) -> Path:
    """
    ``dir/name.mmd`` -> ``dir/name``, or ``<output_dir>/name`` when an output
    directory is configured. The artifact extension is added by the writer.
    """
    src = Path(input_path)
    target_dir = Path(output_dir) if output_dir else src.parent
    return target_dir / src.stem
