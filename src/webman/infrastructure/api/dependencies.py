"""FastAPI dependencies shared by the API routes."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from webman.core.config import get_settings
from webman.domain.services import CollectionService, HeaderService
from webman.infrastructure.persistence.database import get_db_session
from webman.infrastructure.services import ProxyRelay


def get_collection_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CollectionService:
    """Build a CollectionService bound to the request's session."""
    return CollectionService(session)


def get_header_service() -> HeaderService:
    return HeaderService()


def get_proxy_relay() -> ProxyRelay:
    """Build a ProxyRelay from the proxy settings."""
    settings = get_settings()
    return ProxyRelay(
        timeout=settings.proxy_timeout,
        follow_redirects=settings.proxy_follow_redirects,
    )


CollectionServiceDep = Annotated[CollectionService, Depends(get_collection_service)]
HeaderServiceDep = Annotated[HeaderService, Depends(get_header_service)]
ProxyRelayDep = Annotated[ProxyRelay, Depends(get_proxy_relay)]
