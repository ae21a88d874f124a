from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.config import APP_HOST, APP_PORT, CORS_ALLOW_ORIGINS, LOG_FORMAT, LOG_LEVEL
from app.infrastructure.db.postgres import PostgresDatabase, load_config_from_env
from app.logging_setup import setup_logging
from app.presentation.http.errors import install_error_handlers
from app.presentation.http.health_router import router as health_router
from app.presentation.http.task_router import router as task_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the connection pool on startup and close it on shutdown.
    A pool that cannot connect aborts startup.
    """
    setup_logging(LOG_LEVEL, LOG_FORMAT)

    db = PostgresDatabase(load_config_from_env())
    await db.connect()
    app.state.db = db
    logger.info("Server starting on http://%s:%d", APP_HOST, APP_PORT)

    try:
        yield
    finally:
        await db.close()


app = FastAPI(
    title="Task API",
    description="CRUD over tasks stored in PostgreSQL",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(health_router)
app.include_router(task_router)


if __name__ == "__main__":
    # reload needs the "module:attribute" form to watch files
    uvicorn.run(
        "main:app",
        host=APP_HOST,
        port=APP_PORT,
        reload=True,
    )
