# backend/scanstock/main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from .database import WriteSessionLocal
from .errors import register_exception_handlers
from .apps.items.router import router as items_router
from .apps.items.seed import seed_demo_items
from .apps.items.store import SqlItemStore

logger = logging.getLogger(__name__)


def _allowed_origins() -> List[str]:
    """
    Parse CORS_ALLOWED_ORIGINS from env.

    Accepts comma-separated origins. If unset, defaults to local dev ports.
    """
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "")
    if raw:
        origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        if origins:
            return origins
    return [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
        "http://localhost:4173",
    ]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in {"1", "true", "yes", "on"}


def _seed_on_startup() -> None:
    db = WriteSessionLocal()
    try:
        seed_demo_items(SqlItemStore(db))
    except SQLAlchemyError:
        # Seeding is a convenience; the API still serves without it.
        logger.exception("Demo item seeding failed")
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if _env_flag("SEED_DEMO_ITEMS"):
        _seed_on_startup()
    yield


app = FastAPI(title="Scanstock API", version="1.0.0", lifespan=lifespan)
cors_origins = _allowed_origins()
allow_credentials = "*" not in cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

@app.get("/", tags=["health"])
def read_root():
    return {"status": "ok", "message": "Scanstock backend is running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

app.include_router(items_router)
