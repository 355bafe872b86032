"""
Pytest configuration and shared fixtures.

Rendering is replaced by in-memory stubs so no browser is launched:
- ``StubRenderer`` records every batch it receives and answers from a script
- ``SequenceIds`` hands out predictable replacement ids
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from mermaid_cli_batch.models.render import RenderOptions, RenderOutcome, RenderResult  # noqa: E402
from mermaid_cli_batch.settings import Settings  # noqa: E402


GENERATED_ID = "mermaid-0"


def svg_for(definition: str, generated_id: str = GENERATED_ID) -> str:
    return (
        f'<svg id="{generated_id}" xmlns="http://www.w3.org/2000/svg">'
        f"<style>#{generated_id} .node{{fill:#fff;}}</style>"
        f'<g class="root"><text>{definition.strip()}</text></g>'
        f'<marker id="{generated_id}_flowchart-pointEnd"/>'
        "</svg>"
    )


class StubRenderer:
    """Async callable standing in for the browser renderer."""

    def __init__(self, respond: Optional[Callable[[str, RenderOptions], List[RenderOutcome]]] = None):
        self.calls: List[Dict] = []
        self._respond = respond or self._default

    @staticmethod
    def _default(definition: str, options: RenderOptions) -> List[RenderOutcome]:
        return [RenderOutcome.fulfilled(RenderResult(
            svg=svg_for(definition),
            id=GENERATED_ID,
            screenshot=b"\x89PNG\r\n\x1a\nfake" if options.screenshot else None,
        ))]

    async def __call__(self, definitions: List[str], options: RenderOptions) -> List[RenderOutcome]:
        self.calls.append({"definitions": list(definitions), "options": options})
        return self._respond(definitions[0], options)


class SequenceIds:
    def __init__(self, prefix: str = "mermaid"):
        self.prefix = prefix
        self.issued: List[str] = []

    def next(self) -> str:
        letter = "abcdefghijklmnopqrstuvwxyz"[len(self.issued) % 26]
        value = f"{self.prefix}-{letter * 12}"
        self.issued.append(value)
        return value


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests that don't require a browser")


@pytest.fixture
def settings(monkeypatch) -> Settings:
    for key in ("MERMAID_BATCH_INCLUDE_STYLING", "MERMAID_BATCH_LOG_LEVEL", "MERMAID_BATCH_ID_PREFIX"):
        monkeypatch.delenv(key, raising=False)
    return Settings()


@pytest.fixture
def renderer() -> StubRenderer:
    return StubRenderer()


@pytest.fixture
def ids() -> SequenceIds:
    return SequenceIds()


@pytest.fixture
def diagrams(tmp_path) -> Dict[str, Path]:
    src = tmp_path / "src"
    src.mkdir()
    files = {
        "flow": src / "flow.mmd",
        "seq": src / "seq.mmd",
    }
    files["flow"].write_text("flowchart TD\n  A --> B\n", encoding="utf-8")
    files["seq"].write_text("sequenceDiagram\n  A->>B: hi\n", encoding="utf-8")
    return files


@pytest.fixture(autouse=True)
def _detach_cli_logging():
    # main() binds a stdout handler; drop it so later tests never write to a stale capture
    yield
    log = logging.getLogger("mermaid.batch")
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)
