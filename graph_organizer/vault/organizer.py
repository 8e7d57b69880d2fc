"""Orchestration of the complete organize pipeline."""

import threading
from pathlib import Path

from loguru import logger

from graph_organizer.committers.base import Committer
from graph_organizer.committers.git import GitCommitter
from graph_organizer.config import Settings
from graph_organizer.domain.plan import OrganizationPlan, OrganizationResult
from graph_organizer.exceptions import OrganizationInProgressError
from graph_organizer.file_movers.base import FileMover
from graph_organizer.file_movers.local import LocalFileMover
from graph_organizer.organization import (
    CollisionPolicy,
    LoguruObserver,
    OrganizationObserver,
    build_organization_plan,
    resolve_folder_collisions,
)

from .resolver import WikilinkResolver
from .scanner import VaultScanner


class VaultOrganizer:
    """Orchestrates scanning, planning, moving and committing for a vault."""

    def __init__(
        self,
        *,
        vault_path: Path,
        excluded_folders: list[str] | None = None,
        target_folders: list[str] | None = None,
        collision_policy: CollisionPolicy = "suffix",
        file_mover: FileMover | None = None,
        committer: Committer | None = None,
        observer: OrganizationObserver | None = None,
    ):
        """Initialize the organizer with its collaborators.

        Args:
            vault_path: Root folder of the vault
            excluded_folders: Path prefixes whose notes are never organized
            target_folders: Path prefixes notes must match, empty for no restriction
            collision_policy: How to handle groups synthesizing the same folder name
            file_mover: Mover applying plans, defaults to moving files inside the vault
            committer: Committer recording changes, None to disable version control
            observer: Observer receiving pipeline events, defaults to logging them
        """
        self.vault_path = Path(vault_path)
        self.excluded_folders = excluded_folders or []
        self.target_folders = target_folders or []
        self.collision_policy = collision_policy
        self.file_mover = file_mover or LocalFileMover(self.vault_path)
        self.committer = committer
        self.observer = observer or LoguruObserver()

        self.scanner = VaultScanner(self.vault_path)
        self._organize_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: object) -> "VaultOrganizer":
        """Create an organizer configured from application settings.

        Args:
            settings: Application settings
            **overrides: Constructor arguments taking precedence over settings
        """
        vault_path = Path(overrides.get("vault_path", settings.vault_path))

        committer = None
        if settings.git_integration:
            committer = GitCommitter(vault_path, default_message=settings.commit_message)

        kwargs: dict = {
            "vault_path": vault_path,
            "excluded_folders": list(settings.excluded_folders),
            "target_folders": list(settings.target_folders),
            "collision_policy": settings.folder_collision_policy,
            "committer": committer,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    def preview(self) -> OrganizationPlan:
        """Compute the organization plan for the current vault without moving anything.

        Returns:
            Plan with unique folder names

        Raises:
            FolderNameCollisionError: If folder names collide under the reject policy
        """
        snapshot = self.scanner.scan()
        resolver = WikilinkResolver(snapshot)

        plan = build_organization_plan(
            snapshot.notes,
            resolver.resolution_table(),
            excluded_folders=self.excluded_folders,
            target_folders=self.target_folders,
            observer=self.observer,
        )

        collisions = plan.collisions()
        if collisions:
            logger.warning(
                f"{len(collisions)} folder names are claimed by multiple groups, "
                f"applying '{self.collision_policy}' policy"
            )
        return resolve_folder_collisions(plan, self.collision_policy)

    def organize(
        self, dry_run: bool = False, commit_message: str | None = None
    ) -> OrganizationResult:
        """Organize the vault by moving linked notes into shared folders.

        Args:
            dry_run: Only compute the plan, do not move files or commit
            commit_message: Commit message, defaults to the committer's default

        Returns:
            OrganizationResult with the plan, the move report and whether a commit was made

        Raises:
            OrganizationInProgressError: If another organize run is still in progress
        """
        if not self._organize_lock.acquire(blocking=False):
            raise OrganizationInProgressError(f"Organization of {self.vault_path} already running")

        try:
            return self._organize(dry_run, commit_message)
        finally:
            self._organize_lock.release()

    def _organize(self, dry_run: bool, commit_message: str | None) -> OrganizationResult:
        logger.info(f"Starting file organization of {self.vault_path} (dry run: {dry_run})")
        plan = self.preview()

        if plan.is_empty:
            logger.warning("No linked notes found; nothing to organize")
            return OrganizationResult(plan=plan, dry_run=dry_run)

        if dry_run:
            logger.info(f"Dry run - organization plan:\n{format_plan(plan)}")
            return OrganizationResult(plan=plan, dry_run=True)

        report = self.file_mover.move(plan)

        committed = False
        if self.committer is not None and report.moved > 0:
            committed = self.committer.commit(commit_message)

        return OrganizationResult(plan=plan, report=report, committed=committed)


def format_plan(plan: OrganizationPlan) -> str:
    """Render an organization plan as a human readable summary."""
    if plan.is_empty:
        return "Organization plan: nothing to organize"

    lines = ["Organization plan:", ""]
    for folder in plan.folders:
        lines.append(f"Folder: {folder.folder_name}")
        lines.extend(f"  - {member}" for member in folder.members)
        lines.append("")
    lines.append(f"{len(plan.folders)} folders, {plan.note_count} notes")
    return "\n".join(lines)
