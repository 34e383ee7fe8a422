import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_rules, get_settings
from src.api.routes import admin_seo, public_ssr

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules on startup (fail-fast)
    try:
        rules = get_rules()
        logger.info(
            "Rules loaded from %s (locales: %s)",
            settings.rules_path,
            ", ".join(rules.localization.available_locales),
        )
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="SEO Meta Manager",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.include_router(admin_seo.router, prefix="/api/admin/seo", tags=["Admin SEO"])
    app.include_router(public_ssr.router, prefix="", tags=["SSR"])

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "seo-meta"}

    return app


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app()
