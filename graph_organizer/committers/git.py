import subprocess
from pathlib import Path

from loguru import logger

from graph_organizer.committers.base import Committer

DEFAULT_COMMIT_MESSAGE = "Organize files with Graph Organizer"


class GitCommitter(Committer):
    """Commits vault changes by shelling out to the git command line."""

    def __init__(self, repo_path: str | Path, default_message: str = DEFAULT_COMMIT_MESSAGE):
        """Initialize GitCommitter.

        Args:
            repo_path: Working tree to commit in, usually the vault root
            default_message: Commit message used when none is given
        """
        self.repo_path = Path(repo_path)
        self.default_message = default_message

    def is_repository(self) -> bool:
        """Check whether the working tree is inside a git repository."""
        try:
            result = self._git("rev-parse", "--is-inside-work-tree")
        except FileNotFoundError:
            logger.warning("git not found; git integration inactive")
            return False
        except subprocess.CalledProcessError:
            return False
        return result.stdout.strip() == "true"

    def status(self) -> list[str]:
        """Get the paths with uncommitted changes.

        Returns:
            Changed paths as reported by git status, empty if not a repository
        """
        if not self.is_repository():
            logger.warning("Cannot get git status: not a git repository")
            return []

        try:
            result = self._git("status", "--porcelain")
        except subprocess.CalledProcessError as e:
            logger.error(f"Failed to get git status: {e.stderr or e}")
            return []
        return [line[3:] for line in result.stdout.splitlines() if line.strip()]

    def commit(self, message: str | None = None) -> bool:
        """Stage and commit all working tree changes.

        Args:
            message: Commit message, defaults to the configured default message

        Returns:
            True if a commit was created, False if skipped or failed
        """
        if not self.is_repository():
            logger.warning(f"Git commit skipped: {self.repo_path} is not a git repository")
            return False

        if not self.status():
            logger.info("No changes to commit; skipping git commit")
            return False

        commit_message = message or self.default_message
        try:
            self._git("add", "-A")
            self._git("commit", "-m", commit_message)
        except subprocess.CalledProcessError as e:
            logger.error(f"Git commit failed: {e.stderr or e}")
            return False

        logger.info(f'Git: committed file organization changes with message "{commit_message}"')
        return True

    def _git(self, *args: str) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            ["git", *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=True,
        )
