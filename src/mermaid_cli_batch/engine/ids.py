from __future__ import annotations

import secrets
import string
from typing import Protocol

ID_ALPHABET = string.ascii_lowercase
ID_LENGTH = 12

class IdGenerator(Protocol):
    def next(self) -> str: ...

class RandomIdGenerator:
    """Produces ``<prefix>-`` followed by 12 random lowercase letters."""

    def __init__(self, prefix: str = "mermaid", length: int = ID_LENGTH) -> None:
        self.prefix = prefix
        self.length = length

    def next(self) -> str:
        token = "".join(secrets.choice(ID_ALPHABET) for _ in range(self.length))
        return f"{self.prefix}-{token}"
