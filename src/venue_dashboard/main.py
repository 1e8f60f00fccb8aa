import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from venue_dashboard.config import settings
from venue_dashboard.contracts.errors import problem_response
from venue_dashboard.middleware.correlation import correlation_middleware, setup_logging
from venue_dashboard.routers.events import router as events_router
from venue_dashboard.routers.games import router as games_router
from venue_dashboard.routers.members import router as members_router
from venue_dashboard.routers.sessions import router as sessions_router
from venue_dashboard.store.record_store import RecordStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _app_lifespan(application: FastAPI):
    store = RecordStore.from_url(settings.database_url)
    store.create_schema()
    if settings.seed_demo_data:
        store.seed_defaults()
    application.state.record_store = store
    application.state.is_draining = False
    yield
    application.state.is_draining = True
    store.dispose()


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=_app_lifespan)
setup_logging(settings.log_level)
app.middleware("http")(correlation_middleware)
Instrumentator().instrument(app).expose(app)
app.include_router(members_router)
app.include_router(games_router)
app.include_router(sessions_router)
app.include_router(events_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health/live")
async def health_live() -> dict[str, str]:
    return {"status": "live"}


@app.get("/health/ready")
async def health_ready(response: Response) -> dict[str, str]:
    if bool(getattr(app.state, "is_draining", False)):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "draining"}
    return {"status": "ready"}


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return problem_response(
        request,
        status_code=status.HTTP_400_BAD_REQUEST,
        title="Bad Request",
        detail=str(detail),
        error_code="VALIDATION_ERROR",
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        detail="An unexpected error occurred.",
        error_code="INTERNAL_ERROR",
    )
