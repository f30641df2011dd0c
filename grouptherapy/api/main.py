"""
FastAPI app assembly: logging, middleware, error mapping and router wiring.
"""
import logging

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError
from starlette.requests import Request
from starlette.responses import JSONResponse

from grouptherapy.utils.settings import get_settings

# Configure logging
settings = get_settings()
LOG_LEVEL = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", settings.log_level)

from grouptherapy.api.admin import router as admin_router
from grouptherapy.api.artists import router as artists_router
from grouptherapy.api.contacts import router as contacts_router
from grouptherapy.api.events import router as events_router
from grouptherapy.api.playlists import router as playlists_router
from grouptherapy.api.posts import router as posts_router
from grouptherapy.api.radio_shows import router as radio_shows_router
from grouptherapy.api.releases import router as releases_router
from grouptherapy.api.videos import router as videos_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="GroupTherapy CMS",
    description="Content API for artists, releases, events, posts, radio shows, playlists and videos.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Unique slugs/usernames and NOT NULL columns surface here
    logger.warning("integrity_error: path=%s error=%s", request.url.path, exc.orig)
    return JSONResponse(
        {"detail": "Conflicts with existing data or violates a constraint"},
        status_code=status.HTTP_409_CONFLICT,
    )


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(admin_router)
app.include_router(artists_router)
app.include_router(releases_router)
app.include_router(events_router)
app.include_router(posts_router)
app.include_router(contacts_router)
app.include_router(radio_shows_router)
app.include_router(playlists_router)
app.include_router(videos_router)
