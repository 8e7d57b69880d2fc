"""Reference resolution interfaces used by link extraction."""

from typing import Mapping, Protocol


class ReferenceResolver(Protocol):
    def resolve(self, source: str, reference: str) -> str | None:
        """Resolve a raw reference made from a source note to a target identity."""
        ...


class ResolutionTable(ReferenceResolver):
    """Precomputed (source identity, raw reference) to target identity lookup."""

    def __init__(self, entries: Mapping[tuple[str, str], str | None] | None = None):
        """Initialize the table.

        Args:
            entries: Mapping of (source identity, raw reference) to resolved identity,
                or None when the reference is known to be unresolved
        """
        self._entries: dict[tuple[str, str], str | None] = dict(entries or {})

    def add(self, source: str, reference: str, target: str | None) -> None:
        self._entries[(source, reference)] = target

    def resolve(self, source: str, reference: str) -> str | None:
        return self._entries.get((source, reference))

    def __len__(self) -> int:
        return len(self._entries)
