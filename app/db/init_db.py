import logging
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from app.models import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create every table, enum type, index and updated_at trigger that is missing."""
    existing = set(inspect(engine).get_table_names())
    missing = [table.name for table in Base.metadata.sorted_tables if table.name not in existing]
    Base.metadata.create_all(bind=engine)
    if missing:
        logger.info(f"Created tables: {', '.join(missing)}")
    else:
        logger.info("Schema already up to date")


def drop_db(engine: Engine) -> None:
    Base.metadata.drop_all(bind=engine)
    logger.info("Dropped all tables")
