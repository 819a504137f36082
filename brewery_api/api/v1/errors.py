# brewery_api/api/v1/errors.py
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from brewery_api.core.exceptions import NotFoundError, ValidationError
from brewery_api.core.logging import get_logger

logger = get_logger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": [{"field": e.field, "message": e.message} for e in exc.errors]},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # bodies that do not even parse (bad JSON, wrong types) are a 400 too, not FastAPI's 422
    detail = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        detail.append({"field": ".".join(location[1:]) or ".".join(location), "message": error.get("msg", "")})
    logger.info("Malformed request %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    logger.info("%s", exc)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
