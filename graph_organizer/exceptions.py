"""Exceptions raised by graph organizer."""


class GraphOrganizerError(Exception):
    """Base class for all graph organizer errors."""


class FolderNameCollisionError(GraphOrganizerError):
    """Two planned folders share the same synthesized name."""

    def __init__(self, folder_name: str, leaders: list[str]):
        self.folder_name = folder_name
        self.leaders = leaders
        super().__init__(
            f"Folder name '{folder_name}' is claimed by multiple groups: {', '.join(leaders)}"
        )


class FolderCreationError(GraphOrganizerError):
    """A destination folder could not be created."""


class OrganizationInProgressError(GraphOrganizerError):
    """Another organize run is already moving files in the vault."""
