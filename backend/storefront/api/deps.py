from fastapi import Request

from storefront.core.config import Settings, settings
from storefront.core.store import Store


async def get_store(request: Request) -> Store:
    """Dependency to get the store created at startup."""
    return request.app.state.store


async def get_settings() -> Settings:
    """Dependency to get application settings."""
    return settings
