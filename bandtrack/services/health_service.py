import logging
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def get_status(db: Session) -> dict:
    db_connected = False
    try:
        db.execute(text("SELECT 1"))
        db_connected = True
    except SQLAlchemyError:
        logger.warning("Health check could not reach the database", exc_info=True)
    return {"status": "ok", "db_connected": db_connected}
