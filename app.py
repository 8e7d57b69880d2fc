import sys

from loguru import logger

from graph_organizer.api import create_app
from graph_organizer.config import settings
from graph_organizer.vault.organizer import VaultOrganizer
from graph_organizer.vault.watcher import VaultWatcher

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Initializing Graph Organizer for vault {settings.vault_path}")
organizer = VaultOrganizer.from_settings(settings)

watcher = None
if settings.auto_organize:
    watcher = VaultWatcher(
        organizer,
        debounce_seconds=settings.debounce_seconds,
        commit_message=settings.commit_message,
    )

app = create_app(organizer=organizer, watcher=watcher)
