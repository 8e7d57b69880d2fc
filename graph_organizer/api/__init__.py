from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from graph_organizer.api.endpoints import get_endpoints_router
from graph_organizer.vault.organizer import VaultOrganizer
from graph_organizer.vault.watcher import VaultWatcher


def create_app(*, organizer: VaultOrganizer, watcher: VaultWatcher | None = None) -> FastAPI:
    """Create FastAPI app.

    Args:
        organizer: Organizer serving preview and apply requests
        watcher: Optional watcher running for the lifetime of the app
    """

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if watcher is not None:
            watcher.start()
        try:
            yield
        finally:
            if watcher is not None:
                watcher.stop()

    app = FastAPI(title="Graph Organizer", lifespan=lifespan)
    app.include_router(router=get_endpoints_router(organizer=organizer))
    return app
