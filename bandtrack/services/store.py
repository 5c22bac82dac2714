"""Translation of store failures into HTTP errors.

Raw driver messages never reach the client; they go to the log and the
client gets the caller-supplied message instead.
"""
import logging
from contextlib import contextmanager

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bandtrack.database import Base

logger = logging.getLogger(__name__)

# SQLSTATE class 23 codes and their MySQL errno counterparts
_UNIQUE_CODES = {"23505", "1062"}
_FOREIGN_KEY_CODES = {"23503", "1451", "1452"}


def _error_code(exc: IntegrityError) -> str | None:
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return str(code)
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int):
        return str(args[0])
    return None


def is_unique_violation(exc: IntegrityError) -> bool:
    if _error_code(exc) in _UNIQUE_CODES:
        return True
    text = str(exc.orig).lower()
    return "unique constraint" in text or "duplicate entry" in text


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    if _error_code(exc) in _FOREIGN_KEY_CODES:
        return True
    return "foreign key constraint" in str(exc.orig).lower()


def insert_row(
    db: Session,
    row: Base,
    *,
    failure_message: str,
    conflict_message: str | None = None,
    reference_message: str | None = None,
) -> Base:
    db.add(row)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if conflict_message and is_unique_violation(exc):
            logger.info("Rejected duplicate %s: %s", row.__tablename__, exc.orig)
            raise HTTPException(status_code=409, detail=conflict_message)
        if reference_message and is_foreign_key_violation(exc):
            logger.info("Rejected dangling reference on %s: %s", row.__tablename__, exc.orig)
            raise HTTPException(status_code=400, detail=reference_message)
        logger.exception("Database INSERT error on %s", row.__tablename__)
        raise HTTPException(status_code=500, detail=failure_message)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database INSERT error on %s", row.__tablename__)
        raise HTTPException(status_code=500, detail=failure_message)
    db.refresh(row)
    return row


@contextmanager
def read_guard(what: str, failure_message: str):
    """Turn any store failure inside the block into a generic 500."""
    try:
        yield
    except SQLAlchemyError:
        logger.exception("Database query error on %s", what)
        raise HTTPException(status_code=500, detail=failure_message)
