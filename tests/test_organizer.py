"""End to end tests for organizing a vault."""

from pathlib import Path

import pytest

from graph_organizer.committers.git import GitCommitter
from graph_organizer.config import Settings
from graph_organizer.domain.plan import MoveReport
from graph_organizer.exceptions import FolderNameCollisionError, OrganizationInProgressError
from graph_organizer.file_movers.local import LocalFileMover
from graph_organizer.vault.organizer import VaultOrganizer, format_plan
from tests.fakes import FakeCommitter, RecordingFileMover, RecordingObserver

EXPECTED_MAPPING = {"Hub": ["Hub.md", "Projects/Alpha.md", "Beta.md"]}


@pytest.fixture
def colliding_vault(vault_directory: Path) -> Path:
    """Create two clusters whose leaders are both named Topic."""
    for folder in ("A", "B"):
        (vault_directory / folder).mkdir()
        (vault_directory / folder / "Topic.md").write_text(f"[[{folder.lower()}1]]")
        (vault_directory / folder / f"{folder.lower()}1.md").write_text("")
    return vault_directory


def test_preview(organizer: VaultOrganizer) -> None:
    """Test that preview skips excluded, hidden and isolated notes."""
    plan = organizer.preview()

    assert plan.as_mapping() == EXPECTED_MAPPING
    assert plan.folders[0].leader == "Hub.md"


def test_preview_notifies_observer(linked_vault: Path) -> None:
    observer = RecordingObserver()
    organizer = VaultOrganizer(
        vault_path=linked_vault, file_mover=RecordingFileMover(), observer=observer
    )

    organizer.preview()

    assert observer.events[-1] == "plan_assembled"


def test_dry_run_moves_nothing(
    organizer: VaultOrganizer, recording_file_mover: RecordingFileMover
) -> None:
    result = organizer.organize(dry_run=True)

    assert result.dry_run
    assert result.report is None
    assert not result.committed
    assert result.plan.as_mapping() == EXPECTED_MAPPING
    assert recording_file_mover.plans == []


def test_organize_moves_files_and_commits(linked_vault: Path) -> None:
    """Test a real run followed by an idempotent second run."""
    committer = FakeCommitter()
    organizer = VaultOrganizer(
        vault_path=linked_vault,
        excluded_folders=["Archive/"],
        file_mover=LocalFileMover(linked_vault),
        committer=committer,
    )

    result = organizer.organize(commit_message="Organize")

    assert result.report == MoveReport(moved=3)
    assert result.committed
    assert committer.messages == ["Organize"]
    for name in ("Hub.md", "Alpha.md", "Beta.md"):
        assert (linked_vault / "Hub" / name).is_file()
    assert (linked_vault / "Lonely.md").is_file()
    assert (linked_vault / "Archive" / "Old.md").is_file()

    second = organizer.organize()

    assert second.plan.as_mapping() == {"Hub": ["Hub/Hub.md", "Hub/Alpha.md", "Hub/Beta.md"]}
    assert second.report == MoveReport(skipped=3)
    assert not second.committed
    assert committer.messages == ["Organize"]


def test_commit_skipped_outside_repository(
    linked_vault: Path, recording_file_mover: RecordingFileMover
) -> None:
    organizer = VaultOrganizer(
        vault_path=linked_vault,
        file_mover=recording_file_mover,
        committer=FakeCommitter(is_repo=False),
    )

    result = organizer.organize()

    assert result.report is not None
    assert not result.committed


def test_commit_skipped_when_nothing_moved(linked_vault: Path) -> None:
    committer = FakeCommitter()
    organizer = VaultOrganizer(
        vault_path=linked_vault,
        file_mover=RecordingFileMover(report=MoveReport(failed=1)),
        committer=committer,
    )

    result = organizer.organize()

    assert not result.committed
    assert committer.messages == []


def test_empty_vault(vault_directory: Path, recording_file_mover: RecordingFileMover) -> None:
    """Test that a vault without links is left untouched."""
    (vault_directory / "Only.md").write_text("no links")
    organizer = VaultOrganizer(vault_path=vault_directory, file_mover=recording_file_mover)

    result = organizer.organize()

    assert result.plan.is_empty
    assert result.report is None
    assert recording_file_mover.plans == []


def test_suffix_collision_policy(colliding_vault: Path) -> None:
    organizer = VaultOrganizer(
        vault_path=colliding_vault, file_mover=LocalFileMover(colliding_vault)
    )

    result = organizer.organize()

    assert [folder.folder_name for folder in result.plan.folders] == ["Topic", "Topic_2"]
    assert (colliding_vault / "Topic" / "a1.md").is_file()
    assert (colliding_vault / "Topic_2" / "b1.md").is_file()


def test_reject_collision_policy(colliding_vault: Path) -> None:
    organizer = VaultOrganizer(
        vault_path=colliding_vault,
        collision_policy="reject",
        file_mover=RecordingFileMover(),
    )

    with pytest.raises(FolderNameCollisionError):
        organizer.organize()


def test_from_settings(linked_vault: Path) -> None:
    """Test that settings configure filters, policy and git integration."""
    settings = Settings(
        vault_path=linked_vault,
        excluded_folders=["Archive/"],
        folder_collision_policy="merge",
        git_integration=True,
        commit_message="Tidy",
    )

    organizer = VaultOrganizer.from_settings(settings)

    assert organizer.excluded_folders == ["Archive/"]
    assert organizer.collision_policy == "merge"
    assert isinstance(organizer.committer, GitCommitter)
    assert organizer.committer.default_message == "Tidy"
    assert isinstance(organizer.file_mover, LocalFileMover)


def test_from_settings_overrides(linked_vault: Path) -> None:
    settings = Settings(vault_path=linked_vault, excluded_folders=["Archive/"])

    organizer = VaultOrganizer.from_settings(settings, excluded_folders=[])

    assert organizer.excluded_folders == []
    assert organizer.committer is None


def test_from_settings_vault_override_reaches_committer(temp_vault_base: Path) -> None:
    """Test that git commits go to the overridden vault, not the configured one."""
    configured = temp_vault_base / "configured"
    requested = temp_vault_base / "requested"
    settings = Settings(vault_path=configured, git_integration=True)

    organizer = VaultOrganizer.from_settings(settings, vault_path=str(requested))

    assert organizer.vault_path == requested
    assert isinstance(organizer.committer, GitCommitter)
    assert organizer.committer.repo_path == requested
    assert isinstance(organizer.file_mover, LocalFileMover)
    assert organizer.file_mover.vault_path == requested


def test_format_plan(organizer: VaultOrganizer) -> None:
    text = format_plan(organizer.preview())

    assert text.splitlines() == [
        "Organization plan:",
        "",
        "Folder: Hub",
        "  - Hub.md",
        "  - Projects/Alpha.md",
        "  - Beta.md",
        "",
        "1 folders, 3 notes",
    ]


def test_format_empty_plan(vault_directory: Path) -> None:
    organizer = VaultOrganizer(vault_path=vault_directory, file_mover=RecordingFileMover())

    assert format_plan(organizer.preview()) == "Organization plan: nothing to organize"


def test_overlapping_runs_are_rejected(
    organizer: VaultOrganizer, recording_file_mover: RecordingFileMover
) -> None:
    """Test that only one organize run moves files at a time."""
    with organizer._organize_lock:
        with pytest.raises(OrganizationInProgressError):
            organizer.organize()

    assert recording_file_mover.plans == []
    assert organizer.organize().report is not None


def test_lock_released_after_failed_run(colliding_vault: Path) -> None:
    organizer = VaultOrganizer(
        vault_path=colliding_vault,
        collision_policy="reject",
        file_mover=RecordingFileMover(),
    )

    with pytest.raises(FolderNameCollisionError):
        organizer.organize()

    assert not organizer._organize_lock.locked()
