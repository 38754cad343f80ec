"""Default header catalog routes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from webman.infrastructure.api.dependencies import HeaderServiceDep
from webman.infrastructure.api.schemas import DefaultHeaderResponse, ErrorResponse

router = APIRouter()


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[DefaultHeaderResponse],
)
async def list_default_headers(service: HeaderServiceDep) -> list[DefaultHeaderResponse]:
    """List the default header catalog in its fixed order."""
    return [DefaultHeaderResponse.model_validate(h) for h in service.get_default_headers()]


@router.get(
    "/{name}",
    status_code=status.HTTP_200_OK,
    response_model=DefaultHeaderResponse,
    responses={404: {"model": ErrorResponse, "description": "Header not in catalog"}},
)
async def get_default_header(
    name: str,
    service: HeaderServiceDep,
) -> DefaultHeaderResponse | JSONResponse:
    """Look up one catalog entry by its exact name."""
    header = service.get_header_by_name(name)
    if header is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "header not found"},
        )
    return DefaultHeaderResponse.model_validate(header)
