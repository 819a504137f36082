from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from brewery_api.utils.decorators import log_request

router = APIRouter()


@router.get("/health")
@log_request
async def health_check():
    """Checks the health of the application."""
    return {"status": "ok"}


@router.get("/health/ready")
@log_request
async def readiness_check(request: Request):
    """503 while the startup seed is still running."""
    seeder = request.app.state.seeder
    if seeder is not None and not seeder.ready.is_set():
        return JSONResponse(status_code=503, content={"status": "seeding"})
    return {"status": "ready"}
