import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from maintrack import __version__
from maintrack.adapters.sqlite.migrator import SQLiteMigrator
from maintrack.api.deps import get_settings
from maintrack.app_shell.config import validate_ops_rules
from maintrack.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    settings = get_settings()

    # Load rules, validate and migrate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules)
        logger.info("Rules loaded from %s", settings.rules_path)
        SQLiteMigrator(settings.db_path).run_migrations()
    except Exception as e:
        logger.error("Startup failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="MaintTrack API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from maintrack.api.routes import (  # noqa: E402
    auth,
    dashboard,
    equipment,
    maintenance,
    peripherals,
    tickets,
    users,
)

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(equipment.router, prefix="/api/equipment", tags=["Equipment"])
app.include_router(maintenance.equipment_router, prefix="/api/equipment", tags=["Maintenance"])
app.include_router(peripherals.router, prefix="/api/peripherals", tags=["Peripherals"])
app.include_router(
    maintenance.peripheral_router, prefix="/api/peripherals", tags=["Maintenance"]
)
app.include_router(tickets.router, prefix="/api/tickets", tags=["Tickets"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
