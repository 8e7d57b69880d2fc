from pathlib import Path, PurePosixPath

from loguru import logger

from graph_organizer.domain.plan import MoveFailure, MoveReport, OrganizationPlan
from graph_organizer.exceptions import FolderCreationError
from graph_organizer.file_movers.base import FileMover


class LocalFileMover(FileMover):
    """Moves notes between folders of a vault on the local filesystem."""

    def __init__(self, vault_path: str | Path) -> None:
        """Initialize LocalFileMover.

        Args:
            vault_path: Root folder of the vault. Planned folders and note
                identities are relative to it.
        """
        self.vault_path = Path(vault_path)

    def move(self, plan: OrganizationPlan) -> MoveReport:
        """Move every planned note into its folder.

        A folder that cannot be created is counted as one failure and its notes
        are left in place. Notes already in their folder are skipped. Existing
        files are never overwritten.

        Raises:
            FolderNameCollisionError: If two planned folders share a name
        """
        report = MoveReport()

        for folder_name, members in plan.as_mapping().items():
            logger.debug(f"Processing folder: {folder_name} with {len(members)} files")
            try:
                folder = self.ensure_folder_exists(folder_name)
            except FolderCreationError as e:
                logger.error(f"Failed to create folder {folder_name}: {e}")
                report.failed += 1
                report.failures.append(
                    MoveFailure(path=folder_name, destination=folder_name, reason=str(e))
                )
                continue

            for member in members:
                self._move_note(member, folder_name, folder, report)

        logger.info(
            f"File organization complete. Moved {report.moved} files, "
            f"skipped {report.skipped}, {report.failed} errors"
        )
        return report

    def ensure_folder_exists(self, folder_name: str) -> Path:
        """Create a vault folder and any missing parents.

        Args:
            folder_name: Vault-relative folder path, "/" separated

        Returns:
            Absolute path of the folder

        Raises:
            FolderCreationError: If a path component exists but is not a folder
        """
        current = self.vault_path
        for part in (p for p in folder_name.split("/") if p):
            current = current / part
            if current.is_dir():
                continue
            if current.exists():
                raise FolderCreationError(f"Path {current} exists but is not a folder")
            try:
                current.mkdir()
            except OSError as e:
                raise FolderCreationError(f"Could not create folder {current}: {e}") from e
            logger.debug(f"Created folder: {current}")
        return current

    def _move_note(self, member: str, folder_name: str, folder: Path, report: MoveReport) -> None:
        member_path = PurePosixPath(member)
        source = self.vault_path / member_path
        destination = folder / member_path.name
        destination_identity = f"{folder_name.strip('/')}/{member_path.name}"

        if member_path.parent.as_posix() == folder_name.strip("/"):
            logger.debug(f"Already in target folder: {member}")
            report.skipped += 1
            return

        if not source.is_file():
            self._record_failure(report, member, destination_identity, "source file not found")
            return

        if destination.exists():
            self._record_failure(report, member, destination_identity, "destination exists")
            return

        try:
            source.rename(destination)
        except OSError as e:
            self._record_failure(report, member, destination_identity, str(e))
            return

        logger.info(f"Moved {member} to {destination_identity}")
        report.moved += 1

    @staticmethod
    def _record_failure(report: MoveReport, member: str, destination: str, reason: str) -> None:
        logger.warning(f"Failed to move {member} to {destination}: {reason}")
        report.failed += 1
        report.failures.append(MoveFailure(path=member, destination=destination, reason=reason))
