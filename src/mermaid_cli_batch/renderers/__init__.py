from __future__ import annotations

from typing import Awaitable, Callable, List

from ..models.render import RenderOptions, RenderOutcome

# definitions in, one settled outcome per definition out (same order)
Renderer = Callable[[List[str], RenderOptions], Awaitable[List[RenderOutcome]]]

__all__ = ["Renderer"]
