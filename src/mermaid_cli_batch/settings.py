# src/mermaid_cli_batch/settings.py
from __future__ import annotations

import re
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MERMAID_JS_URL = "https://cdn.jsdelivr.net/npm/mermaid@11/dist/mermaid.min.js"
_CSS_IDENT = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")

class Settings(BaseSettings):
    """Environment-driven knobs (prefix ``MERMAID_BATCH_``)."""

    model_config = SettingsConfigDict(env_prefix="MERMAID_BATCH_", extra="ignore")

    # -c/-C are only offered (and forwarded to the renderer) when True
    include_styling: bool = Field(default=True)

    # where the browser page loads Mermaid from; a local file wins over the URL
    mermaid_js_url: str = Field(default=DEFAULT_MERMAID_JS_URL)
    mermaid_js_path: Optional[str] = Field(default=None)

    # chromium launch
    browser_executable: Optional[str] = Field(default=None)
    browser_args: List[str] = Field(default_factory=list)

    # prefix of the ids Mermaid assigns in the page; rewritten ids always use "mermaid"
    id_prefix: str = Field(default="mermaid")

    # overrides the --verbose derived level when set
    log_level: Optional[str] = Field(default=None)

    @field_validator("id_prefix")
    @classmethod
    def _css_safe_prefix(cls, v: str) -> str:
        # the screenshot locator selects svg#<prefix>-<n>
        if not _CSS_IDENT.match(v):
            raise ValueError(f"id_prefix must be a CSS identifier, got {v!r}")
        return v
