"""Passthrough proxy route.

Lets the browser front-end issue arbitrary HTTP requests without being
blocked by the target's CORS policy.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from webman.core.exceptions import BadRequestError, UpstreamError
from webman.core.logging import LoggingContext, get_logger
from webman.infrastructure.api.dependencies import ProxyRelayDep
from webman.infrastructure.api.schemas import (
    ProxyErrorResponse,
    ProxyRequest,
    ProxyResponse,
)

logger = get_logger(__name__)

router = APIRouter()


def proxy_error(status_code: int, message: str) -> JSONResponse:
    """Build the proxy failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ProxyErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/",
    status_code=status.HTTP_200_OK,
    response_model=ProxyResponse,
    response_model_by_alias=True,
    responses={
        400: {"model": ProxyErrorResponse, "description": "Request cannot be built"},
        500: {"model": ProxyErrorResponse, "description": "Upstream call failed"},
    },
)
async def proxy(
    request: ProxyRequest,
    relay: ProxyRelayDep,
) -> ProxyResponse | JSONResponse:
    """Relay one HTTP request and return the upstream response.

    Any upstream status, including 4xx and 5xx, is a successful relay and
    comes back inside the envelope with HTTP 200.
    """
    with LoggingContext(proxy_method=request.method or "GET", proxy_url=request.url):
        try:
            result = await relay.relay(
                request.method,
                request.url,
                headers=request.headers,
                body=request.body,
            )
        except BadRequestError as e:
            logger.info("Proxy request rejected", error=e.message)
            return proxy_error(status.HTTP_400_BAD_REQUEST, e.message)
        except UpstreamError as e:
            logger.warning("Proxy upstream failed", error=e.message)
            return proxy_error(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)

    return ProxyResponse.model_validate(result)
