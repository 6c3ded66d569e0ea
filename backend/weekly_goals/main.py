import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from weekly_goals.api.goals import router as goals_router
from weekly_goals.api.progress import router as progress_router
from weekly_goals.db import Base, engine
from weekly_goals.models.goal import Goal  # noqa: F401  (import ensures table is registered)
from weekly_goals.models.weekly_progress import WeeklyProgress  # noqa: F401
from weekly_goals.core.config import settings
from weekly_goals.core.errors import register_exception_handlers
from weekly_goals.core.logging_config import configure_logging


configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Weekly Goals")

# Allow CORS for the frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Create DB tables (goals, weekly_progress) on startup
Base.metadata.create_all(bind=engine)

app.include_router(goals_router)
app.include_router(progress_router)


@app.get("/")
def root():
    return {"message": "Weekly goals backend is running"}


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting server on http://%s:%s", settings.host, settings.port)
    uvicorn.run("weekly_goals.main:app", host=settings.host, port=settings.port)
