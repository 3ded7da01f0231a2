from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
import logging

from rentease.core.config import settings
from rentease.db.base import Base

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

if not DATABASE_URL:
    raise ValueError("[ERROR] DATABASE_URL not found!")


def build_engine(url: str):
    """Create an engine with the connect args suited to the backend."""
    if url.lower().startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},  # SQLite multi-thread
            echo=False,
        )
    return create_engine(
        url,
        connect_args={"connect_timeout": 10},
        echo=False,
        pool_pre_ping=True,
        pool_size=3,
        max_overflow=10,
        pool_recycle=3600,
        pool_timeout=30,
    )


engine = build_engine(DATABASE_URL)

# Create SessionLocal class
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def test_connection() -> bool:
    """Test database connection - NON-BLOCKING."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        safe_url = DATABASE_URL.split("@")[1] if "@" in DATABASE_URL else DATABASE_URL.split("/")[-1]
        logger.info(f"[OK] Database connected: {safe_url}")
        return True
    except Exception as e:
        logger.warning(f"[WARN] Database connection failed (continuing): {e}")
        return False


def init_db() -> bool:
    """Initialize database tables - NON-BLOCKING."""
    try:
        # Import models so they're registered with Base
        from rentease.db.kv import KeyValueEntry  # noqa: F401

        Base.metadata.create_all(bind=engine)
        logger.info("[OK] Database tables initialized!")
        return True
    except Exception as e:
        logger.warning(f"[WARN] Database init warning: {e}")
        return False


def close_db_connection() -> None:
    """Close database connections."""
    try:
        engine.dispose()
        logger.info("[OK] Database connections closed")
    except Exception as e:
        logger.warning(f"[WARN] Error closing DB: {e}")
