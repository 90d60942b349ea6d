import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from portfolio_api.config import ADMIN_NAME, ADMIN_PASSCODE, CORS_ORIGINS, LOG_LEVEL
from portfolio_api.crud.admin import ensure_admin
from portfolio_api.dependencies import create_db_and_tables, engine
from portfolio_api.routers import router
from portfolio_api.utils.error_handlers import register_exception_handlers

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def on_startup():
    """Create database tables and make sure an admin exists."""
    create_db_and_tables()

    if ADMIN_PASSCODE:
        with Session(engine) as db:
            ensure_admin(db, passcode=ADMIN_PASSCODE, name=ADMIN_NAME)
    else:
        logger.warning("ADMIN_PASSCODE is not set; no admin will be seeded")


@asynccontextmanager
async def lifespan(app: FastAPI):
    on_startup()
    yield


# Create FastAPI app
app = FastAPI(
    title="Portfolio API",
    description="Content and contact API for a personal portfolio site and its admin CMS",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)


@app.get("/health")
async def health():
    return {"status": "ok"}


app.include_router(router)


if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
