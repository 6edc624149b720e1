"""API configuration adapter.

Bridges the centralized housebroker_config settings with the API layer.
"""

from fastapi import Request

from housebroker_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings
