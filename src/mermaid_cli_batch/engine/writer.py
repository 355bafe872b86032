from __future__ import annotations

import logging
from pathlib import Path

from ..models.render import OutputArtifactSet, RenderResult
from .ids import IdGenerator

log = logging.getLogger("mermaid.batch.engine.writer")

def rewrite_identifier(markup: str, generated_id: str, replacement: str) -> str:
    """Replace every literal occurrence of the renderer's id."""
    if not generated_id:
        return markup
    return markup.replace(generated_id, replacement)

def write_artifacts(result: RenderResult, output_base: Path, id_generator: IdGenerator) -> OutputArtifactSet:
    """
    Write ``<output_base>.svg`` (and ``.png`` when the result carries a
    screenshot) after swapping the generated id for a fresh one, so several
    outputs can be embedded in one page without duplicate element ids.
    """
    markup = result.svg or ""
    if result.id:
        markup = rewrite_identifier(markup, result.id, id_generator.next())
    else:
        log.warning("No generated id reported for %s; markup written unchanged", output_base)

    artifacts = OutputArtifactSet.from_base(output_base, with_screenshot=bool(result.screenshot))
    artifacts.svg_path.parent.mkdir(parents=True, exist_ok=True)

    log.info("Writing %s", artifacts.svg_path)
    artifacts.svg_path.write_text(markup, encoding="utf-8")

    if artifacts.png_path is not None and result.screenshot:
        log.info("Writing %s", artifacts.png_path)
        artifacts.png_path.write_bytes(result.screenshot)

    return artifacts
