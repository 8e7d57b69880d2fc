import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from graph_organizer.config import settings

security = HTTPBasic()


def verify_basic_auth(credentials: HTTPBasicCredentials) -> bool:
    """Verify basic auth credentials without raising exceptions."""
    if not settings.auth_username or not settings.auth_password:
        return False
    is_correct_username = secrets.compare_digest(credentials.username, settings.auth_username)
    is_correct_password = secrets.compare_digest(credentials.password, settings.auth_password)
    return is_correct_username and is_correct_password


def verify_credentials(credentials: HTTPBasicCredentials = Depends(security)) -> str:  # noqa: B008
    """Verify basic auth credentials."""
    if not verify_basic_auth(credentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
