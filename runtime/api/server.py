"""
FastAPI application entry point for the daylog admin runtime.

Responsibilities:
- configure process logging
- construct the shared LogStore (uploads dir + persisted option store)
- run first-time activation on startup
- include log routes under /logs

Run with:

    uvicorn runtime.api.server:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from configs.logging_setup import setup_logging
from configs.settings import settings
from core.options.option_store import OptionStore
from runtime.store.log_store import LogStore
from . import log_routes


setup_logging(settings.log_level)


# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

# Host option store: debug flag + install time, persisted under runtime/data.
option_store = OptionStore(path=str(settings.options_file))

# Daily log files under <uploads_dir>/logs.
log_store = LogStore(
    uploads_dir=str(settings.uploads_dir),
    option_store=option_store,
)

# ---------------------------------------------------------------------------
# FastAPI app + route registration
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(_app: FastAPI):
    log_store.activate()
    yield


app = FastAPI(title="daylog Admin", lifespan=lifespan)


# Initialize the router module with our shared objects, then include it.
log_routes.init_routes(log_store=log_store)
app.include_router(log_routes.router, prefix="/logs")
