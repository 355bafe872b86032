# src/mermaid_cli_batch/engine/batch.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..errors import RenderError
from ..models.invocation import InvocationConfig
from ..models.render import OutputArtifactSet, RenderOptions, RenderRequest
from ..renderers import Renderer
from .adapter import read_definition, render_definition
from .ids import IdGenerator
from .locator import resolve_output_base
from .writer import write_artifacts

log = logging.getLogger("mermaid.batch.engine.batch")

async def write_output(
    input_path: str,
    output_base: Path,
    *,
    renderer: Renderer,
    id_generator: IdGenerator,
    options: RenderOptions,
) -> Optional[OutputArtifactSet]:
    log.info("Transforming %s", input_path)

    definition = read_definition(input_path)
    try:
        result = await render_definition(renderer, RenderRequest(definition=definition, options=options))
    except RenderError as e:
        log.error("Error transforming %s", input_path, extra=e.to_log_extra())
        return None

    return write_artifacts(result, output_base, id_generator)

async def process_charts(
    config: InvocationConfig,
    *,
    renderer: Renderer,
    id_generator: IdGenerator,
    options: RenderOptions,
) -> List[OutputArtifactSet]:
    """
    Render every input in command-line order, one at a time. A render
    failure skips that input only; file-system errors abort the batch.
    """
    written: List[OutputArtifactSet] = []
    for input_path in config.inputs:
        output_base = resolve_output_base(input_path, config.output)
        artifacts = await write_output(
            input_path,
            output_base,
            renderer=renderer,
            id_generator=id_generator,
            options=options,
        )
        if artifacts is not None:
            written.append(artifacts)
    return written
