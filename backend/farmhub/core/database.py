"""
Database configuration and session management

Production runs on the Supabase Postgres instance through a DIRECT CONNECTION
(port 5432). The Supabase pooler (port 6543) does not support everything the
migrations need. SQLite is supported for local development and tests.
"""
import logging
import threading
import time

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        # Dashboard queries run in worker threads, each with its own session
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_pre_ping": True,  # Verify connections before using
        # 5 base + 5 overflow: enough for the dashboard fan-out plus regular requests
        "pool_size": 5,
        "max_overflow": 5,
        "pool_recycle": 300,
        "pool_timeout": 30,
        "pool_reset_on_return": "commit",
        "connect_args": {
            "connect_timeout": 10,
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        },
    }


engine = create_engine(settings.DATABASE_URL, echo=False, **_engine_kwargs(settings.DATABASE_URL))

_warmup_thread = None
_warmup_complete = False


def warmup_pool(connections: int = 2):
    """Pre-create connections in a background thread to reduce cold start latency"""
    global _warmup_thread, _warmup_complete

    if engine.dialect.name == "sqlite":
        _warmup_complete = True
        return

    def _warmup_sync():
        global _warmup_complete
        opened = []
        try:
            for _ in range(connections):
                try:
                    conn = engine.connect()
                    conn.execute(text("SELECT 1"))
                    opened.append(conn)
                except Exception as e:
                    logger.warning(f"Failed to create connection during warmup: {e}")

            for conn in opened:
                conn.close()

            if opened:
                logger.info(f"Connection pool warmed up ({len(opened)} connections)")
            else:
                logger.warning("No connections were warmed up")
        finally:
            _warmup_complete = True

    _warmup_thread = threading.Thread(target=_warmup_sync, daemon=True)
    _warmup_thread.start()


def wait_for_warmup_complete(timeout=5.0):
    """Wait for the warmup thread (used for a clean shutdown)"""
    if _warmup_complete:
        return True

    start_time = time.time()
    while not _warmup_complete and (time.time() - start_time) < timeout:
        time.sleep(0.1)

    return _warmup_complete


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
