import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from sqlalchemy import text

from focus_insights.config import settings
from focus_insights.database import engine

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize Sentry
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=0.2 if settings.ENVIRONMENT == "production" else 1.0,
        send_default_pii=False,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: verify DB connection
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))

    yield

    # Shutdown
    await engine.dispose()


app = FastAPI(
    title="Focus Insights API",
    version="0.1.0",
    lifespan=lifespan,
)

from focus_insights.middleware.error_handler import register_error_handlers  # noqa: E402

register_error_handlers(app)

# Routers
from focus_insights.routers.focus import router as focus_router  # noqa: E402

app.include_router(focus_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
