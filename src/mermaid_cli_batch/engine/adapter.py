from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from ..errors import ConfigFileError, RenderError
from ..models.invocation import InvocationConfig
from ..models.render import RenderOptions, RenderRequest, RenderResult
from ..renderers import Renderer
from ..settings import Settings
from ..utils.logging import preview

log = logging.getLogger("mermaid.batch.engine.adapter")

_YAML_SUFFIXES = {".yaml", ".yml"}

def read_definition(path: str | Path) -> str:
    # missing or unreadable files propagate; only render problems are recoverable
    return Path(path).read_text(encoding="utf-8")

def load_mermaid_config(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigFileError(f"Cannot parse config file {p}", data={"path": str(p), "reason": str(e)}) from e
    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Config file {p} must contain an object",
            data={"path": str(p), "type": type(data).__name__},
        )
    return data

def load_render_options(config: InvocationConfig, settings: Settings) -> RenderOptions:
    """
    Build the options bag shared by every render call of this run. Config
    and CSS are read once, up front, and only when styling is enabled.
    """
    opts: Dict[str, Any] = {"screenshot": config.screenshot}
    if settings.include_styling:
        if config.config_file:
            opts["mermaid_config"] = load_mermaid_config(config.config_file)
            log.info("Using config %s", config.config_file)
        if config.css_file:
            opts["css"] = Path(config.css_file).read_text(encoding="utf-8")
            log.info("Using CSS %s", config.css_file)
    return RenderOptions(**opts)

async def render_definition(renderer: Renderer, request: RenderRequest) -> RenderResult:
    """
    Render one definition as a single-element batch and return the first
    result. Raises RenderError when there is nothing usable to write.
    """
    if not request.definition:
        raise RenderError("Empty diagram definition")

    outcomes = await renderer([request.definition], request.options)
    if not outcomes:
        raise RenderError("Renderer returned no result")

    first = outcomes[0]
    if first.status != "fulfilled" or first.value is None:
        raise RenderError("Renderer rejected the diagram", data={"reason": preview(first.reason or "", 400)})

    result = first.value
    if not result.svg:
        raise RenderError("Renderer returned no markup", data={"id": result.id})

    log.debug("render.ok", extra={
        "id": result.id,
        "svg_len": len(result.svg),
        "screenshot_bytes": len(result.screenshot or b""),
        "title": result.title,
    })
    return result
