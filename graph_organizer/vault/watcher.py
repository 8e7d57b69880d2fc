"""Automatic organization of a vault when its notes change.

Editors save often and a single organize run moves many files, so change
events are coalesced: organization runs once the vault has been quiet for
the debounce interval.
"""

import threading
import time
from pathlib import Path
from typing import Callable

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from graph_organizer.exceptions import OrganizationInProgressError

from .organizer import VaultOrganizer


class DebouncedTrigger:
    """Coalesces bursts of calls to trigger() into a single callback run."""

    def __init__(self, callback: Callable[[], None], delay: float):
        """Initialize the trigger.

        Args:
            callback: Function to run once events have settled
            delay: Seconds without new events before the callback runs
        """
        self.callback = callback
        self.delay = delay
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        self._running = False

    def trigger(self) -> None:
        """Schedule the callback, restarting the delay if one is already pending."""
        with self._lock:
            # Events caused by the callback itself (moved files) are ignored.
            if self._running:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
            self._running = True
        try:
            self.callback()
        except Exception as e:
            logger.error(f"Automatic organization failed: {e}")
        finally:
            with self._lock:
                self._running = False


class VaultChangeHandler(FileSystemEventHandler):
    """Forwards relevant vault changes to a debounced trigger."""

    RELEVANT_EXTENSIONS = {".md"}

    def __init__(self, vault_path: Path, trigger: DebouncedTrigger):
        super().__init__()
        self.vault_path = Path(vault_path)
        self.trigger = trigger

    def is_relevant(self, path: str) -> bool:
        """Check whether a changed path may affect the link graph."""
        p = Path(path)
        try:
            relative_path = p.relative_to(self.vault_path)
        except ValueError:
            return False

        if any(part.startswith(".") for part in relative_path.parts):
            return False
        return p.suffix.lower() in self.RELEVANT_EXTENSIONS

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return

        paths = [event.src_path]
        dest_path = getattr(event, "dest_path", "")
        if dest_path:
            paths.append(dest_path)

        if any(self.is_relevant(str(path)) for path in paths):
            logger.debug(f"Vault change detected: {event.event_type} {event.src_path}")
            self.trigger.trigger()


class VaultWatcher:
    """Watches a vault and organizes it after changes settle."""

    def __init__(
        self,
        organizer: VaultOrganizer,
        *,
        debounce_seconds: float = 2.0,
        commit_message: str | None = None,
    ):
        self.organizer = organizer
        self.commit_message = commit_message
        self.trigger = DebouncedTrigger(self._organize, debounce_seconds)
        self.handler = VaultChangeHandler(organizer.vault_path, self.trigger)
        self._observer: BaseObserver | None = None

    def start(self) -> None:
        """Start watching the vault in a background thread."""
        self._observer = Observer()
        self._observer.schedule(self.handler, str(self.organizer.vault_path), recursive=True)
        self._observer.start()
        logger.info(f"Watching {self.organizer.vault_path} for changes")

    def stop(self) -> None:
        self.trigger.cancel()
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None
        logger.info("Stopped watching vault")

    def run_forever(self) -> None:
        """Watch until interrupted with Ctrl+C."""
        self.start()
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()

    def _organize(self) -> None:
        try:
            result = self.organizer.organize(commit_message=self.commit_message)
        except OrganizationInProgressError as e:
            logger.warning(f"Automatic organization skipped: {e}")
            return

        if result.report is not None:
            logger.info(
                f"Automatic organization: {result.report.moved} moved, "
                f"{result.report.failed} errors"
            )
