from typing import Protocol


class Committer(Protocol):
    """Protocol for recording vault changes in version control."""

    def is_repository(self) -> bool:
        """Check whether the vault is under version control."""
        ...

    def commit(self, message: str | None = None) -> bool:
        """Stage and commit all changes, returning True if a commit was created."""
        ...
