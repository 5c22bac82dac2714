from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from jinja2 import pass_context
from sqlalchemy.engine import make_url
from starlette.middleware.sessions import SessionMiddleware

from bandtrack import __version__
from bandtrack.config import settings
from bandtrack.database import Base, engine
from bandtrack.errors import register_exception_handlers
import bandtrack.models  # noqa: F401 (registers all models)
from bandtrack.routers import assignments, export, health, instruments, roster, uniforms
from bandtrack.routers import ui

logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_sqlite_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    directory = os.path.dirname(url.database)
    if directory:
        os.makedirs(directory, exist_ok=True)


@asynccontextmanager
async def lifespan(application: FastAPI):
    configure_logging()
    # Create tables for dev mode without alembic
    _ensure_sqlite_dir(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    logger.info("BandTrack %s started (env=%s)", __version__, settings.APP_ENV)
    yield
    logger.info("BandTrack shutting down")


app = FastAPI(
    title="BandTrack",
    description="Instrument and uniform inventory for a school band program",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    https_only=settings.APP_ENV == "production",
    same_site="lax",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

register_exception_handlers(app)


# --- Jinja2 flash helper ---
@pass_context
def _get_flashed_messages(ctx, with_categories=False):
    request = ctx.get("request")
    if request is None:
        return []
    messages = request.session.pop("_flash_messages", [])
    if with_categories:
        return messages
    return [msg for _cat, msg in messages]


ui.templates.env.globals["get_flashed_messages"] = _get_flashed_messages

# API routers
app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(roster.router, prefix=settings.API_PREFIX)
app.include_router(instruments.router, prefix=settings.API_PREFIX)
app.include_router(uniforms.router, prefix=settings.API_PREFIX)
app.include_router(assignments.router, prefix=settings.API_PREFIX)
app.include_router(export.router, prefix=settings.API_PREFIX)

# Page
app.include_router(ui.router)
