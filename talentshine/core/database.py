import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _safe_url(url: str) -> str:
    """Hide the password part of a connection URL for logging."""
    if "@" not in url or "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:****@{host}"


class Database:
    """
    Owns the SQLAlchemy engine and session factory.

    Created once at process start, connected in the application lifespan and
    disposed at shutdown. Request handlers get sessions through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False, timezone: Optional[str] = None):
        self.url = url
        self.echo = echo
        self.timezone = timezone
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def _create_engine(self) -> Engine:
        if self.is_sqlite:
            # In-memory databases must share one connection across threads
            kwargs = {"connect_args": {"check_same_thread": False}}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(self.url, echo=self.echo, **kwargs)

        return create_engine(
            self.url,
            echo=self.echo,
            poolclass=QueuePool,
            pool_size=5,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,
            pool_pre_ping=True,
            connect_args={"connect_timeout": 5},
        )

    def connect(self) -> None:
        """Create the engine and verify that the database is reachable."""
        if self.engine is not None:
            return

        logger.info(f"Connecting to database: {_safe_url(self.url)}")
        engine = self._create_engine()

        if engine.dialect.name == "postgresql" and self.timezone:

            @event.listens_for(engine, "connect")
            def set_timezone(dbapi_conn, connection_record):
                cursor = dbapi_conn.cursor()
                cursor.execute(f"SET timezone='{self.timezone}'")
                cursor.close()

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Database connection successful")
        except Exception as e:
            logger.error(f"Failed to connect to database: {str(e)}")
            engine.dispose()
            raise

        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def create_all(self) -> None:
        # Models must be imported so that their tables are registered on Base
        import talentshine.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connection pool disposed")
        self.engine = None
        self.SessionLocal = None

    def ping(self) -> bool:
        if self.SessionLocal is None:
            return False
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self.SessionLocal is None:
            raise RuntimeError("Database is not connected")

        db = self.SessionLocal()
        try:
            yield db
        except SQLAlchemyError as e:
            logger.error(f"Database error occurred: {str(e)}")
            db.rollback()
            raise
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()


# -----------------------
# Dependency for FastAPI
# -----------------------
def get_db(request: Request):
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
