# facet_counts/app.py
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import Config, setup_logging
from .database import Database
from .handlers import filter_counts_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the pool on startup and close it on shutdown"""
    logger.info(f"{Config.APP_NAME} v{Config.APP_VERSION} starting...")
    await app.state.db.connect()
    try:
        yield
    finally:
        logger.info(f"{Config.APP_NAME} shutting down...")
        await app.state.db.close()


def create_application(db: Optional[Database] = None) -> FastAPI:
    """Create the FastAPI app serving the filter counts endpoint"""
    setup_logging()

    app = FastAPI(title=Config.APP_NAME, version=Config.APP_VERSION, lifespan=lifespan)
    app.state.db = db or Database()

    # browser single-page apps call this cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(filter_counts_router, prefix=Config.API_PREFIX)

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "app": Config.APP_NAME,
            "version": Config.APP_VERSION,
        }

    logger.info("FastAPI application created")
    return app
