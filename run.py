import uvicorn
import os

from rentease.core.config import settings


def run_migrations():
    """Run Alembic migrations."""
    try:
        from alembic.config import Config
        from alembic import command

        alembic_cfg = Config("alembic.ini")
        print("[STARTUP] Running database migrations...")
        command.upgrade(alembic_cfg, "head")
        print("[STARTUP] Migrations complete!")
        return True
    except Exception as e:
        print(f"[WARN] Migration failed: {e}")
        return False


if __name__ == "__main__":
    # Disable reload in production
    reload = os.getenv("ENV") == "development"

    # The app falls back to create_all on startup when migrations are skipped
    if os.getenv("RUN_MIGRATIONS") == "true":
        run_migrations()

    uvicorn.run(
        "rentease.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=reload,
        log_level="info",
        workers=1,  # The store lock is per process
    )
