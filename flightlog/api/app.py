"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from flightlog.api.routes import flights, profile  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize Firebase Admin on startup."""
    if os.environ.get("FLIGHTLOG_AUTH_DISABLED") == "1":
        logger.warning("Auth disabled, every request runs as the dev user")
    else:
        try:
            import firebase_admin
            firebase_admin.initialize_app()
            logger.info("Firebase Admin SDK initialized")
        except ValueError:
            # Already initialized
            logger.info("Firebase Admin SDK already initialized")
        except Exception as exc:
            logger.warning("Firebase Admin SDK init failed: %s", exc)
    yield


app = FastAPI(
    title="FlightLog API",
    description="Quick-entry pilot logbook",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(flights.router, prefix="/api")
app.include_router(profile.router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok"}
