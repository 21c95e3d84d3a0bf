"""Shared plumbing for the SQLAlchemy-backed stores."""

import functools
import logging

from sqlalchemy.exc import SQLAlchemyError

from projectmatch.exceptions import StoreError

logger = logging.getLogger(__name__)


def store_operation(func):
    """Translate SQLAlchemy failures into StoreError. Domain errors pass through untouched."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.error("Store operation %s failed: %s", func.__qualname__, e)
            raise StoreError(f"Store operation {func.__name__} failed") from e

    return wrapper


def escape_like(value: str) -> str:
    """Escape \\, % and _ characters for use in LIKE/ILIKE patterns."""
    return value.replace("\\", "\\\\").replace("%", r"\%").replace("_", r"\_")
