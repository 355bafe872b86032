from __future__ import annotations

PROGRAM_NAME = "mermaid-cli-batch"
__version__ = "1.2.0"

__all__ = ["PROGRAM_NAME", "__version__"]
