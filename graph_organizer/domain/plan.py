"""Organization plan domain models."""

from collections import defaultdict

from pydantic import BaseModel

from graph_organizer.exceptions import FolderNameCollisionError


class PlannedFolder(BaseModel):
    """A destination folder and the notes assigned to it.

    Attributes:
        folder_name: Folder name synthesized from the leader
        leader: Identity of the note the group was grown from
        members: Note identities in the order they joined the group, leader first
    """

    folder_name: str
    leader: str
    members: list[str]


class OrganizationPlan(BaseModel):
    """Ordered set of planned folders produced by the grouping engine."""

    folders: list[PlannedFolder] = []

    @property
    def is_empty(self) -> bool:
        return not self.folders

    @property
    def note_count(self) -> int:
        return sum(len(folder.members) for folder in self.folders)

    def collisions(self) -> dict[str, list[str]]:
        """Get folder names claimed by more than one group.

        Returns:
            Dictionary mapping each colliding folder name to the leaders claiming it
        """
        leaders_by_name: dict[str, list[str]] = defaultdict(list)
        for folder in self.folders:
            leaders_by_name[folder.folder_name].append(folder.leader)
        return {name: leaders for name, leaders in leaders_by_name.items() if len(leaders) > 1}

    def as_mapping(self) -> dict[str, list[str]]:
        """Get the plan as an ordered folder name to members mapping.

        Raises:
            FolderNameCollisionError: If two folders share a name
        """
        mapping: dict[str, list[str]] = {}
        for folder in self.folders:
            if folder.folder_name in mapping:
                leaders = self.collisions()[folder.folder_name]
                raise FolderNameCollisionError(folder.folder_name, leaders)
            mapping[folder.folder_name] = list(folder.members)
        return mapping


class MoveFailure(BaseModel):
    """A note that could not be moved, or a folder that could not be created."""

    path: str
    destination: str
    reason: str


class MoveReport(BaseModel):
    """Per-file outcome counts of a file mover pass."""

    moved: int = 0
    skipped: int = 0
    failed: int = 0
    failures: list[MoveFailure] = []

    @property
    def succeeded(self) -> bool:
        return self.failed == 0


class OrganizationResult(BaseModel):
    """Outcome of an organize run."""

    plan: OrganizationPlan
    report: MoveReport | None = None
    committed: bool = False
    dry_run: bool = False
