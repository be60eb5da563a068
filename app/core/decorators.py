import functools
from typing import Callable
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.exceptions import translate_integrity_error
import logging

logger = logging.getLogger(__name__)

def translate_integrity_errors(func: Callable) -> Callable:
    """Roll back and re-raise constraint failures as ``DataIntegrityError`` subclasses.

    Wraps repository write methods whose first argument after ``self`` is the
    session. Nothing written by the failed call survives the rollback.
    """
    @functools.wraps(func)
    def wrapper(self, db: Session, *args, **kwargs):
        try:
            return func(self, db, *args, **kwargs)
        except IntegrityError as e:
            db.rollback()
            error = translate_integrity_error(e)
            logger.warning(f"{func.__qualname__} rejected: {error}")
            raise error from e

    return wrapper
