"""Vehicle service — FastAPI backend."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from utils.config import CORS_ORIGINS, LOG_LEVEL, VEHICLES_FILE

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.routes import router
from api.vehicles import router as vehicles_router
from repositories.vehicle_repository import VehicleRepository
from services.vehicle_service import VehicleService
from utils.seed_loader import load_seed_vehicles

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Vehicle Service",
    description="In-memory vehicle records: list, filter, create, update, delete",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(vehicles_router, prefix="/api")


def _validation_errors(exc: RequestValidationError) -> list[dict]:
    """Location and message of each validation error."""
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed path, query or body values as 400 instead of 422."""
    LOG.warning("Invalid request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Malformed request", "errors": _validation_errors(exc)},
    )


@app.on_event("startup")
def startup() -> None:
    """Create the vehicle store and load seed vehicles if VEHICLES_FILE is set."""
    repository = VehicleRepository()
    if VEHICLES_FILE:
        repository.create_multiple(load_seed_vehicles(VEHICLES_FILE))
    app.state.vehicle_service = VehicleService(repository)


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "vehicle-service", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
