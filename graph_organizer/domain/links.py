"""Link domain models."""

from pydantic import BaseModel, ConfigDict


class LinkRecord(BaseModel):
    """A resolved directed link from one note to another."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str


class GraphNode(BaseModel):
    """Represents a note in the link graph.

    Attributes:
        identity: Note identity this node belongs to
        sources: Identities of notes linking to this note
        targets: Identities of notes this note links to
    """

    identity: str
    sources: set[str] = set()
    targets: set[str] = set()

    @property
    def degree(self) -> int:
        # A mutual link counts once in each set, so it adds 2 here.
        return len(self.sources) + len(self.targets)

    @property
    def connections(self) -> set[str]:
        return self.sources | self.targets
