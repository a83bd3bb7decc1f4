import asyncio
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import (
    FastAPI,
)
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from authapi.core.accounts import AccountService
from authapi.core.errors import install_error_handlers
from authapi.routers import get_routers
from authapi.shared import Config, ConfigError, Logger, load_config
from authapi.store import RecordStore, create_store

logger = Logger(__name__, level=logging.DEBUG).get_logger()


# ================================================================================
#       FastAPI Setup
# ================================================================================
def create_app(config: Config, store: RecordStore | None = None) -> FastAPI:
    """Build the application around one loaded config and one record store."""
    Logger.configure(config)

    if store is None:
        store = create_store(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup does not wait for the store to answer
        probe = asyncio.create_task(
            run_in_threadpool(probe_store, store, config.store.table)
        )
        app.state.store_probe = probe
        yield
        if not probe.done():
            probe.cancel()

    app = FastAPI(title="authapi", lifespan=lifespan)
    app.state.config = config
    app.state.store = store
    app.state.accounts = AccountService(store, table=config.store.table)

    install_error_handlers(app)

    for router in get_routers():
        app.include_router(router)

    cors = config.network.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allow_origins,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )

    return app


def probe_store(store: RecordStore, table: str):
    """Log whether the store answers. A failure here does not stop the server."""
    try:
        rows = store.ping(table)
    except Exception as e:
        logger.error("Record store is not reachable: %r", e)
        return

    logger.info("Record store connected, %s sample row(s) in %s", len(rows), table)


# ================================================================================
#       Command Line
# ================================================================================
def welcome(config: Config):
    # Log server banner
    for line in config.general.title.split("\n"):
        logger.info(line)

    # Log server startup information
    logger.info("Starting account server (%s)", config.env.app_env)


def main(argv=None):
    try:
        config = load_config()
    except ConfigError as e:
        logger.critical("❌ %s", e)
        sys.exit(1)

    Logger.configure(config)
    welcome(config)

    if config.env.is_production:
        # The hosting platform imports authapi.asgi:app itself
        logger.info("Production environment, not binding a local server")
        return

    import uvicorn

    logger.info("🚀 Server starting on http://%s:%s", config.network.host, config.port)
    uvicorn.run(
        "authapi.asgi:app",
        host=config.network.host,
        port=config.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
