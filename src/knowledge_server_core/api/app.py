"""
Knowledge Server API - application factory

Configures the FastAPI application:
- application lifecycle (knowledge server startup/shutdown)
- CORS middleware
- API routes
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ..server import KnowledgeServer
from .endpoints import router


def create_app(server: Optional[KnowledgeServer] = None) -> FastAPI:
    """Build the FastAPI app around a knowledge server (created from config when omitted)"""
    server = server or KnowledgeServer()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("--- Starting Knowledge Server API ---")
        await server.initialize()
        yield
        logger.info("--- Shutting Down Knowledge Server API ---")
        await server.close()

    app = FastAPI(
        title="Knowledge Server API",
        description="Document ingestion into a knowledge store and question answering over it.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.server = server

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app
