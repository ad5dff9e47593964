"""
Helpers shared by the per-entity access modules.

Every access function runs through `store_operation`: a SQLAlchemy error is
rolled back, logged and re-raised as StoreFault, so callers can tell
"nothing there" (None / empty list) apart from "the store failed".
"""
import functools
import logging
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rentbook.core.errors import StoreFault
from rentbook.core.events import ChangeEvent, changes

logger = logging.getLogger(__name__)


def store_operation(fn):
    name = f"{fn.__module__.rsplit('.', 1)[-1]}.{fn.__name__}"

    @functools.wraps(fn)
    def wrapper(db: Session, *args, **kwargs):
        try:
            return fn(db, *args, **kwargs)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("%s failed", name)
            raise StoreFault(f"{name} failed: {exc.__class__.__name__}") from exc

    return wrapper


def apply_partial_update(db: Session, model, row_id: int, data: Dict[str, Any]) -> int:
    """
    UPDATE only the columns present in `data`. Returns the number of rows written.
    An empty payload never reaches the store.
    """
    if not data:
        return 0
    count = (
        db.query(model)
        .filter(model.id == row_id)
        .update(data, synchronize_session="fetch")
    )
    db.commit()
    return count


def delete_row(db: Session, model, row_id: int) -> int:
    """DELETE by id without checking the row exists first."""
    count = db.query(model).filter(model.id == row_id).delete(synchronize_session="fetch")
    db.commit()
    return count


def notify(entity_type: str, action: str, entity_id: int) -> None:
    logger.info(
        "%s %s %s",
        entity_type.capitalize(),
        entity_id,
        action,
        extra={"change": {"entity_type": entity_type, "action": action, "entity_id": entity_id}},
    )
    changes.publish(ChangeEvent(entity_type=entity_type, action=action, entity_id=entity_id))
