"""API Dependencies - the privileged-operator gate for mutating routes.

Invariants:
    - require_operator runs before the route body; a rejected caller never reaches the registry
    - The presented key is read from the configured header (default X-Operator-Key)

Design Decisions:
    - FastAPI dependency as middleware: registry validation stays unaware of callers
"""

import logging

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.core.enforce_access import check_operator

logger = logging.getLogger(__name__)


async def require_operator(
    request: Request, settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless it carries the operator key."""
    operation = f"{request.method} {request.url.path}"
    error = check_operator(
        request.headers.get(settings.operator_header),
        settings.operator_key,
        operation,
    )
    if error is not None:
        logger.warning(
            f"Operator check failed for {operation}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        raise error
