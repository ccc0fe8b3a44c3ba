"""
Dependency injection for hello_api.

Handlers receive the Settings the application was built with instead of
reading process-wide state.
"""

from typing import Annotated

from fastapi import Depends, Request

from hello_api.config import Settings


def get_app_settings(request: Request) -> Settings:
    """
    Get the settings attached to the running application.

    Args:
        request: Current request (injected)

    Returns:
        Settings stored on ``app.state`` by ``create_app``
    """
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
"""Injected Settings instance of the current application."""
