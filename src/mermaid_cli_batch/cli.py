from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Sequence

from . import PROGRAM_NAME, __version__
from .engine.adapter import load_render_options
from .engine.batch import process_charts
from .engine.ids import IdGenerator, RandomIdGenerator
from .engine.locator import expand_inputs
from .models.invocation import InvocationConfig
from .models.render import OutputArtifactSet, RenderOptions
from .renderers import Renderer
from .renderers.mermaid_playwright import MermaidRenderer
from .settings import Settings
from .utils.logging import setup_logging

log = logging.getLogger("mermaid.batch.cli")

_DESCRIPTION = """\
Process multiple mermaid chart definition files in one pass with the console.

Example:
  mermaid-cli-batch --input *.mmd
"""

def version_banner() -> str:
    return f"{PROGRAM_NAME} version {__version__}"

def build_parser(include_styling: bool = True) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=f"{version_banner()}\n\n{_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print the help")
    parser.add_argument(
        "-i", "--input",
        dest="inputs",
        nargs="+",
        action="extend",
        default=[],
        metavar="PATH",
        help=(
            "The file or the files to process. Must be text files that contain each a "
            "Mermaid diagram definition. A glob description of the file locations is possible."
        ),
    )
    parser.add_argument("-o", "--output", metavar="DIR", help="The output folder (optional)")
    parser.add_argument(
        "-s", "--screenshot",
        action="store_true",
        help="Create a PNG screenshot of the diagram (optional)",
    )
    if include_styling:
        parser.add_argument(
            "-c", "--configFile",
            dest="config_file",
            metavar="PATH",
            help="Mermaid configuration file, JSON or YAML (optional)",
        )
        parser.add_argument(
            "-C", "--cssFile",
            dest="css_file",
            metavar="PATH",
            help="CSS file applied to the rendered diagrams (optional)",
        )
    parser.add_argument("--verbose", action="store_true", help="Verbose logging (optional)")
    parser.add_argument("-V", "--version", action="store_true", help="Indicate the program version")
    return parser

def parse_invocation(argv: Optional[Sequence[str]] = None, *, include_styling: bool = True) -> InvocationConfig:
    """Unknown flags end the process with an argparse usage error."""
    ns = build_parser(include_styling).parse_args(argv)
    return InvocationConfig(
        inputs=expand_inputs(ns.inputs),
        output=ns.output,
        screenshot=ns.screenshot,
        config_file=getattr(ns, "config_file", None),
        css_file=getattr(ns, "css_file", None),
        verbose=ns.verbose,
        help=ns.help,
        version=ns.version,
    )

async def _run(
    config: InvocationConfig,
    settings: Settings,
    options: RenderOptions,
    renderer: Optional[Renderer],
    id_generator: IdGenerator,
) -> List[OutputArtifactSet]:
    if renderer is not None:
        return await process_charts(config, renderer=renderer, id_generator=id_generator, options=options)
    async with MermaidRenderer(settings) as default_renderer:
        return await process_charts(config, renderer=default_renderer, id_generator=id_generator, options=options)

def main(
    argv: Optional[Sequence[str]] = None,
    *,
    settings: Optional[Settings] = None,
    renderer: Optional[Renderer] = None,
    id_generator: Optional[IdGenerator] = None,
) -> int:
    """
    Entry point for the ``mermaid-cli-batch`` console script.

    ``renderer`` and ``id_generator`` default to the Playwright renderer and
    random ids; tests pass stubs.
    """
    settings = settings or Settings()
    config = parse_invocation(argv, include_styling=settings.include_styling)
    setup_logging(verbose=config.verbose, level=settings.log_level)

    if config.help:
        print(build_parser(settings.include_styling).format_help())
        return 0
    if config.version:
        print(version_banner())
        return 0

    if not config.inputs:
        log.info("No input files given")
        return 0

    options = load_render_options(config, settings)
    id_generator = id_generator or RandomIdGenerator()

    written = asyncio.run(_run(config, settings, options, renderer, id_generator))
    log.info("Done", extra={"inputs": len(config.inputs), "written": len(written)})
    return 0

if __name__ == "__main__":
    sys.exit(main())
