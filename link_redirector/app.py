#!/usr/bin/env python3
"""
Main entry point for the link redirector service.

Usage:
    link-redirector

Environment variables:
    SECRET - Shared secret required to create links
    STORE_URL - Key-value store URL (memory://, redis://..., questdb://...)
    STORE_CREATE_TABLES - Set to '1' to create the QuestDB links table
    KEY_PREFIX - Redis key namespace
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Config, load_config
from .common.logging_config import setup_logging
from .service import LinkRedirectorService
from .store import create_store
from .web_app import create_app


def build_service(config: Config, logger=None) -> LinkRedirectorService:
    """Build the store and service described by the configuration."""
    store = create_store(
        config.store_url,
        key_prefix=config.key_prefix,
        create_tables=config.store_create_tables == "1",
        logger=logger,
    )
    return LinkRedirectorService(
        store=store,
        secret=config.shared_secret,
        logger=logger,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting link redirector service...")
    logger.info(f"Using store {config.store_url.split('@')[-1]}")

    service = build_service(config, logger)
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down link redirector service...")
    await service.close()
    logger.info("Service stopped")


def create_server_app(config: Optional[Config] = None) -> FastAPI:
    """Build the served app; the store and service are created in the lifespan.

    Also the uvicorn factory target for multi-worker runs, where each worker
    process loads configuration and sets up logging for itself.
    """
    config = config or load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    app = create_app(service_instance=None, config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def main():
    """Main entry point."""
    config = load_config()
    app = create_server_app(config)
    logger = app.state.logger

    logger.info("Link Redirector Service")
    # SecretStr fields are masked in the dump
    logger.info(f"Configuration: {config.model_dump(exclude={'store_url'})}")

    if config.workers > 1:
        # uvicorn only spawns worker processes for an import string
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            "link_redirector.app:create_server_app",
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=True,
        )
        return

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
