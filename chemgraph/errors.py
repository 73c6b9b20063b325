"""Error hierarchy for chemgraph."""

from typing import Any, Mapping, Optional


class ChemGraphError(Exception):
    """Base exception for chemgraph failures."""

    def __init__(
        self, message: str, *, context: Optional[Mapping[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.context = dict(context) if context else {}

    def log_message(self) -> str:
        if not self.context:
            return str(self)
        return f"{self}: {self.context}"


class AtomContainerIndexError(ChemGraphError, IndexError):
    """Positional access outside the logical bounds of a container."""


class InvalidGraphError(ChemGraphError, ValueError):
    """Graph input that a traversal cannot work on."""


class CloneError(ChemGraphError):
    """An element could not be duplicated while cloning a container."""


__all__ = [
    "ChemGraphError",
    "AtomContainerIndexError",
    "InvalidGraphError",
    "CloneError",
]
