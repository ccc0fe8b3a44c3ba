"""Version endpoint."""

from fastapi import APIRouter

from hello_api import __version__
from hello_api.api.v1.version.models import VersionResponse
from hello_api.dependencies import SettingsDep

router = APIRouter()


@router.get("/version", response_model=VersionResponse)
async def get_version(settings: SettingsDep) -> VersionResponse:
    """
    Report the service version and the environment it runs in.

    Args:
        settings: Application settings the app was created with (injected)

    Returns:
        Version string and environment name
    """
    return VersionResponse(version=__version__, environment=settings.environment)
