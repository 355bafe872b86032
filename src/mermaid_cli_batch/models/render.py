from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

class RenderOptions(BaseModel):
    screenshot: bool = False
    mermaid_config: Optional[Dict[str, Any]] = None
    css: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        # absent keys are left out rather than sent as empty values
        return self.model_dump(exclude_none=True)

class RenderRequest(BaseModel):
    definition: str
    options: RenderOptions = Field(default_factory=RenderOptions)

class RenderResult(BaseModel):
    svg: Optional[str] = None
    id: Optional[str] = None
    screenshot: Optional[bytes] = None
    title: Optional[str] = None
    description: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None

class RenderOutcome(BaseModel):
    """One settled entry of a render batch."""

    status: Literal["fulfilled", "rejected"] = "fulfilled"
    value: Optional[RenderResult] = None
    reason: Optional[str] = None

    @classmethod
    def fulfilled(cls, value: RenderResult) -> "RenderOutcome":
        return cls(status="fulfilled", value=value)

    @classmethod
    def rejected(cls, reason: str) -> "RenderOutcome":
        return cls(status="rejected", reason=reason)

class OutputArtifactSet(BaseModel):
    svg_path: Path
    png_path: Optional[Path] = None

    @classmethod
    def from_base(cls, output_base: Path, with_screenshot: bool) -> "OutputArtifactSet":
        # the base carries no extension; appending keeps dotted stems like "a.v2" intact
        return cls(
            svg_path=Path(f"{output_base}.svg"),
            png_path=Path(f"{output_base}.png") if with_screenshot else None,
        )
