from .invocation import InvocationConfig
from .render import (
    OutputArtifactSet,
    RenderOptions,
    RenderOutcome,
    RenderRequest,
    RenderResult,
)

__all__ = [
    "InvocationConfig",
    "OutputArtifactSet",
    "RenderOptions",
    "RenderOutcome",
    "RenderRequest",
    "RenderResult",
]
