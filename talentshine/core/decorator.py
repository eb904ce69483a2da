import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from talentshine.core.exceptions import ConflictError, InternalError

logger = logging.getLogger(__name__)


def db_exception(conflict_message: str = "Duplicate entry: already exists"):
    """Translate SQLAlchemy failures raised by a service method into app errors."""

    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except IntegrityError:
                # mostly a duplicate entry
                self.db.rollback()
                raise ConflictError(conflict_message)
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"{func.__qualname__} failed: {e}", exc_info=True)
                raise InternalError("Internal Server Error")

        return wrapper

    return decorator
