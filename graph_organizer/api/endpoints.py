from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel

from graph_organizer.api.auth import verify_credentials
from graph_organizer.domain.plan import OrganizationPlan, OrganizationResult
from graph_organizer.exceptions import (
    FolderNameCollisionError,
    GraphOrganizerError,
    OrganizationInProgressError,
)
from graph_organizer.vault.organizer import VaultOrganizer


class ApplyRequest(BaseModel):
    dry_run: bool = False
    commit_message: str | None = None


def _create_preview_endpoint(organizer: VaultOrganizer):
    """Create the organization preview endpoint handler."""

    def preview_organization(_: str = Depends(verify_credentials)) -> OrganizationPlan:
        """Compute the organization plan without moving any file."""
        try:
            return organizer.preview()
        except FolderNameCollisionError as e:
            logger.warning(f"Organization preview rejected: {e}")
            raise HTTPException(status_code=409, detail=str(e)) from e
        except (GraphOrganizerError, OSError) as e:
            logger.error(f"Error previewing organization: {e}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return preview_organization


def _create_apply_endpoint(organizer: VaultOrganizer):
    """Create the organization apply endpoint handler."""

    def apply_organization(
        request: ApplyRequest | None = None,
        _: str = Depends(verify_credentials),
    ) -> OrganizationResult:
        """Organize the vault, optionally as a dry run."""
        request = request or ApplyRequest()
        try:
            return organizer.organize(
                dry_run=request.dry_run, commit_message=request.commit_message
            )
        except (FolderNameCollisionError, OrganizationInProgressError) as e:
            logger.warning(f"Organization rejected: {e}")
            raise HTTPException(status_code=409, detail=str(e)) from e
        except (GraphOrganizerError, OSError) as e:
            logger.error(f"Error organizing files: {e}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return apply_organization


def get_endpoints_router(*, organizer: VaultOrganizer) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.get("/api/organization/preview", response_model=OrganizationPlan)(
        _create_preview_endpoint(organizer)
    )
    router.post("/api/organization/apply", response_model=OrganizationResult)(
        _create_apply_endpoint(organizer)
    )

    return router
