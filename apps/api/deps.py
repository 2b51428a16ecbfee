"""FastAPI dependencies for dependency injection."""

import logging
from typing import Any, Awaitable, Callable, Dict

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.application.services.order_service import OrderApplicationService
from core.application.validation import ValidationMode, validate_order_payload
from core.domain.exceptions import OrderValidationError


logger = logging.getLogger(__name__)


def get_db_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Get the SQLAlchemy session factory opened by the app lifespan.

    Returns:
        async_sessionmaker instance
    """
    return request.app.state.session_factory


def get_order_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_db_session_factory),
) -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(session_factory)


def validated_body(mode: ValidationMode) -> Callable[[Request], Awaitable[Dict[str, Any]]]:
    """Build a dependency that decodes and validates the JSON body.

    Args:
        mode: Schema to validate against

    Returns:
        Dependency yielding the accepted payload
    """

    async def dependency(request: Request) -> Dict[str, Any]:
        try:
            payload = await request.json()
        except ValueError:
            # Empty or malformed body; reported as a non-object payload
            payload = None

        try:
            return validate_order_payload(payload, mode)
        except OrderValidationError as e:
            logger.warning(
                f"Invalid request body: {e.message}",
                extra={"method": request.method, "path": request.url.path, "body": payload},
            )
            raise

    return dependency
