# src/mermaid_cli_batch/models/invocation.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

class InvocationConfig(BaseModel):
    """Parsed command line; built once per run and never mutated."""

    model_config = ConfigDict(frozen=True)

    inputs: List[str] = Field(default_factory=list)
    output: Optional[str] = None
    screenshot: bool = False
    config_file: Optional[str] = None
    css_file: Optional[str] = None
    verbose: bool = False
    help: bool = False
    version: bool = False
