from datetime import datetime, timezone

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from http import HTTPStatus

from ligas_backend.core import config
from ligas_backend.core.database import init_db, get_sync_session
from ligas_backend.core.exceptions import LigasError
from ligas_backend.core.logger import setup_logger
from ligas_backend.core.security import get_current_user
from ligas_backend.seed.seed_admin import seed_admin

# --- Routers ---
from ligas_backend.core.auth import router as auth_router
from ligas_backend.routes.league_routes import router as league_router
from ligas_backend.routes.team_routes import router as team_router
from ligas_backend.routes.coach_routes import router as coach_router
from ligas_backend.routes.player_routes import router as player_router
from ligas_backend.routes.match_routes import router as match_router
from ligas_backend.routes.stats_routes import router as stats_router

logger = setup_logger(__name__)

app = FastAPI(
    title="Ligas API",
    version="0.1.0",
    description="Leagues, teams, coaches, players and matches with result recording.",
)


@app.on_event("startup")
def on_startup():
    # 1️⃣ Create tables
    init_db()

    # 2️⃣ Seed the admin account
    with get_sync_session() as session:
        seed_admin(session)

    logger.info("Ligas API started")


# =========================================
# ERROR RESPONSES
# =========================================
def error_body(status: int, message: str, request: Request) -> JSONResponse:
    """Uniform error payload: timestamp, status, error, message, path."""
    return JSONResponse(
        status_code=status,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": status,
            "error": HTTPStatus(status).phrase,
            "message": message,
            "path": request.url.path,
        },
    )


@app.exception_handler(LigasError)
async def ligas_error_handler(request: Request, exc: LigasError):
    return error_body(exc.status_code, exc.message, request)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return error_body(400, "; ".join(messages), request)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
    return error_body(409, "operation violates a data integrity constraint", request)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_body(exc.status_code, str(exc.detail), request)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return error_body(500, "internal server error", request)


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok", "test_mode": config.TEST_MODE}


# Routers (everything except /auth requires a bearer token)
protected = [Depends(get_current_user)]

app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(league_router, prefix="/leagues", tags=["Leagues"], dependencies=protected)
app.include_router(team_router, prefix="/teams", tags=["Teams"], dependencies=protected)
app.include_router(coach_router, prefix="/coaches", tags=["Coaches"], dependencies=protected)
app.include_router(player_router, prefix="/players", tags=["Players"], dependencies=protected)
app.include_router(match_router, prefix="/matches", tags=["Matches"], dependencies=protected)
app.include_router(stats_router, prefix="/stats", tags=["Stats"], dependencies=protected)
