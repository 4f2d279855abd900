"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to core/errors.py types
      (IntegrityError → ConstraintViolationError, everything else → StorageError)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - translate_storage_errors wraps service writes so callers outside FastAPI
      (scripts, tests) see the same typed errors as HTTP clients
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from inkwell.core.errors import (
    ConstraintViolationError, ErrorContext, InkwellError, StorageError,
)

logger = logging.getLogger(__name__)


def describe_integrity_error(exc: IntegrityError, resource: str) -> tuple[str, str]:
    """Map a driver integrity message to (user-facing message, constraint kind).

    PostgreSQL says 'duplicate key value violates unique constraint "posts_slug_key"',
    SQLite says 'UNIQUE constraint failed: posts.slug'. Both name the column.
    """
    raw = str(exc.orig if exc.orig is not None else exc).lower()
    if "slug" in raw:
        return f"A {resource} with this slug already exists", "unique_slug"
    if "foreign key" in raw:
        return f"{resource.capitalize()} references a row that does not exist", "foreign_key"
    if "unique" in raw or "duplicate" in raw:
        return f"Duplicate {resource}", "unique"
    return "Integrity constraint violated", "integrity"


@asynccontextmanager
async def translate_storage_errors(
    session: AsyncSession,
    operation: str,
    resource: str,
    context: ErrorContext | None = None,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise SQLAlchemy failures as Inkwell errors."""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        message, constraint = describe_integrity_error(e, resource)
        logger.warning(
            f"{operation} rejected: {message}",
            extra={"operation": operation, "error_code": "CONSTRAINT_VIOLATION"},
        )
        raise ConstraintViolationError(message, constraint, context) from e
    except OperationalError as e:
        await session.rollback()
        logger.error(f"DB operational error during {operation}: {e}")
        raise StorageError("Connection or operational error", operation, context) from e
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise StorageError("Database driver error", operation, context) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise StorageError("Database operation failed", operation, context) from e
    except InkwellError:
        await session.rollback()
        raise


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            echo=echo,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StorageError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StorageError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
