import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from graph_organizer.api import create_app
from graph_organizer.vault.organizer import VaultOrganizer
from tests.fakes import RecordingFileMover


@pytest.fixture(autouse=True)
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Override settings for testing."""
    monkeypatch.setattr("graph_organizer.config.settings.auth_username", "admin")
    monkeypatch.setattr("graph_organizer.config.settings.auth_password", "password")


@pytest.fixture
def temp_vault_base() -> Generator[Path, None, None]:
    """Create a temporary directory holding the test vault."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def vault_directory(temp_vault_base: Path) -> Path:
    """Create an empty vault directory."""
    vault_dir = temp_vault_base / "vault"
    vault_dir.mkdir()
    return vault_dir


@pytest.fixture
def linked_vault(vault_directory: Path) -> Path:
    """Create a vault with one cluster, an isolated note and an archived note.

    Hub.md links to Projects/Alpha.md and Beta.md, Alpha links back to Hub.
    """
    (vault_directory / "Projects").mkdir()
    (vault_directory / "Archive").mkdir()
    (vault_directory / ".obsidian").mkdir()

    (vault_directory / "Hub.md").write_text("# Hub\n\nSee [[Alpha]] and [[Beta|the beta]].")
    (vault_directory / "Projects" / "Alpha.md").write_text("# Alpha\n\nBack to [[Hub]].")
    (vault_directory / "Beta.md").write_text("# Beta\n\nNo outgoing links.")
    (vault_directory / "Lonely.md").write_text("# Lonely\n\nMentions Hub without linking.")
    (vault_directory / "Archive" / "Old.md").write_text("# Old\n\nUsed to link [[Hub]].")
    (vault_directory / ".obsidian" / "Hidden.md").write_text("[[Hub]]")
    return vault_directory


@pytest.fixture
def recording_file_mover() -> RecordingFileMover:
    return RecordingFileMover()


@pytest.fixture
def organizer(linked_vault: Path, recording_file_mover: RecordingFileMover) -> VaultOrganizer:
    return VaultOrganizer(
        vault_path=linked_vault,
        excluded_folders=["Archive/"],
        file_mover=recording_file_mover,
    )


@pytest.fixture
def test_client(organizer: VaultOrganizer) -> TestClient:
    """Create test client with a fake file mover."""
    app = create_app(organizer=organizer)
    return TestClient(app)
