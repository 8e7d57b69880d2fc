"""CLI for previewing and applying a link-based folder organization of a vault"""

import argparse
import sys

from loguru import logger

from graph_organizer.config import settings
from graph_organizer.vault.organizer import VaultOrganizer, format_plan
from graph_organizer.vault.watcher import VaultWatcher


def main(
    vault: str,
    dry_run: bool = False,
    commit_message: str | None = None,
    watch: bool = False,
    excluded_folders: list[str] | None = None,
    target_folders: list[str] | None = None,
) -> int:
    overrides: dict = {"vault_path": vault}
    if excluded_folders is not None:
        overrides["excluded_folders"] = excluded_folders
    if target_folders is not None:
        overrides["target_folders"] = target_folders
    organizer = VaultOrganizer.from_settings(settings, **overrides)

    if watch:
        watcher = VaultWatcher(
            organizer,
            debounce_seconds=settings.debounce_seconds,
            commit_message=commit_message,
        )
        watcher.run_forever()
        return 0

    result = organizer.organize(dry_run=dry_run, commit_message=commit_message)
    print(format_plan(result.plan))

    if result.report is None:
        return 0

    print(
        f"\nFiles organized: {result.report.moved} moved, {result.report.skipped} skipped, "
        f"{result.report.failed} errors"
    )
    for failure in result.report.failures:
        print(f"  ! {failure.path} -> {failure.destination}: {failure.reason}")
    if result.committed:
        print("Git: committed file organization changes")

    return 0 if result.report.succeeded else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--vault",
        type=str,
        required=False,
        help="Vault folder containing markdown notes",
        default=str(settings.vault_path),
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Only print the organization plan"
    )
    parser.add_argument(
        "--commit-message",
        type=str,
        required=False,
        help="Git commit message, used when git integration is enabled",
        default=None,
    )
    parser.add_argument(
        "--watch", action="store_true", help="Organize automatically whenever notes change"
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        help="Path prefix of notes to leave alone, can be repeated",
    )
    parser.add_argument(
        "--target",
        action="append",
        default=None,
        help="Only organize notes under this path prefix, can be repeated",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = "DEBUG" if args.debug else settings.log_level
    logger.configure(handlers=[{"sink": sys.stderr, "level": log_level}])

    sys.exit(
        main(
            vault=args.vault,
            dry_run=args.dry_run,
            commit_message=args.commit_message,
            watch=args.watch,
            excluded_folders=args.exclude,
            target_folders=args.target,
        )
    )
