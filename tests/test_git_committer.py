import shutil
import subprocess
from pathlib import Path

import pytest

from graph_organizer.committers.git import DEFAULT_COMMIT_MESSAGE, GitCommitter

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture(autouse=True)
def isolated_git(monkeypatch: pytest.MonkeyPatch, temp_vault_base: Path) -> None:
    """Keep git from picking up the user's configuration or an enclosing repository."""
    empty_config = temp_vault_base / "gitconfig"
    empty_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(empty_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(temp_vault_base))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")


@pytest.fixture
def repo(vault_directory: Path) -> Path:
    subprocess.run(["git", "init"], cwd=vault_directory, check=True, capture_output=True)
    return vault_directory


def _last_commit_message(repo: Path) -> str:
    result = subprocess.run(
        ["git", "log", "-1", "--format=%s"],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def test_not_a_repository(vault_directory: Path) -> None:
    """Test that a plain folder disables committing."""
    committer = GitCommitter(vault_directory)

    assert not committer.is_repository()
    assert committer.status() == []
    assert not committer.commit()


def test_commit_changes(repo: Path) -> None:
    """Test that all changes are staged and committed with the given message."""
    (repo / "Topic").mkdir()
    (repo / "Topic" / "Note.md").write_text("note")
    committer = GitCommitter(repo)

    assert committer.is_repository()
    assert committer.status() == ["Topic/"]
    assert committer.commit("Organize notes")
    assert _last_commit_message(repo) == "Organize notes"
    assert committer.status() == []


def test_default_message(repo: Path) -> None:
    (repo / "Note.md").write_text("note")

    assert GitCommitter(repo).commit()
    assert _last_commit_message(repo) == DEFAULT_COMMIT_MESSAGE


def test_clean_tree_is_not_committed(repo: Path) -> None:
    (repo / "Note.md").write_text("note")
    committer = GitCommitter(repo, default_message="First")
    assert committer.commit()

    assert not committer.commit("Nothing changed")
    assert _last_commit_message(repo) == "First"
