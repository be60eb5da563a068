"""Maintenance of the ``updated_at`` column.

Every table carrying ``updated_at`` is stamped with the current instant on
update, whatever value the caller supplied. The policy lives here only:

* ORM writes go through :func:`stamp_updated_at`, a ``before_update`` mapper
  listener registered once on ``TimestampMixin`` and propagated to every model.
* Any other write path (Core ``UPDATE`` statements, raw SQL) is covered by a
  database trigger. PostgreSQL gets a single ``update_updated_at_column()``
  function shared by one ``BEFORE UPDATE`` trigger per table; SQLite, which has
  no trigger functions, gets an equivalent ``AFTER UPDATE`` trigger per table.

Inserts are not handled here: ``created_at`` and ``updated_at`` both default to
``CURRENT_TIMESTAMP`` on the server, so a new row starts with equal values.
"""
import logging
from sqlalchemy import DDL, MetaData, event, func
from sqlalchemy.orm import object_session
from app.core.constants import UPDATED_AT_FUNCTION

logger = logging.getLogger(__name__)

UPDATED_AT_COLUMN = "updated_at"

POSTGRES_FUNCTION_SQL = f"""
CREATE OR REPLACE FUNCTION {UPDATED_AT_FUNCTION}()
RETURNS TRIGGER AS $$
BEGIN
    NEW.updated_at = CURRENT_TIMESTAMP;
    RETURN NEW;
END;
$$ language 'plpgsql'
"""

POSTGRES_DROP_FUNCTION_SQL = f"DROP FUNCTION IF EXISTS {UPDATED_AT_FUNCTION}()"

POSTGRES_TRIGGER_SQL = (
    "CREATE TRIGGER update_%(table)s_updated_at "
    "BEFORE UPDATE ON %(table)s "
    "FOR EACH ROW "
    f"EXECUTE FUNCTION {UPDATED_AT_FUNCTION}()"
)

SQLITE_TRIGGER_SQL = (
    "CREATE TRIGGER update_%(table)s_updated_at "
    "AFTER UPDATE ON %(table)s "
    "FOR EACH ROW "
    "BEGIN "
    "UPDATE %(table)s SET updated_at = CURRENT_TIMESTAMP WHERE id = NEW.id; "
    "END"
)

DROP_TRIGGER_SQL = {
    "postgresql": "DROP TRIGGER IF EXISTS update_%(table)s_updated_at ON %(table)s",
    "sqlite": "DROP TRIGGER IF EXISTS update_%(table)s_updated_at",
}


def trigger_name(table_name: str) -> str:
    return f"update_{table_name}_updated_at"


def trigger_sql(table_name: str, dialect_name: str) -> str:
    """Plain-SQL trigger definition for one table, for migrations and raw setups."""
    if dialect_name == "postgresql":
        return POSTGRES_TRIGGER_SQL % {"table": table_name}
    if dialect_name == "sqlite":
        return SQLITE_TRIGGER_SQL % {"table": table_name}
    raise NotImplementedError(f"No updated_at trigger for dialect {dialect_name}")


def stamp_updated_at(mapper, connection, target):
    session = object_session(target)
    if session is not None and not session.is_modified(target, include_collections=False):
        return
    target.updated_at = func.now()


def timestamped_tables(metadata: MetaData):
    return [table for table in metadata.sorted_tables if UPDATED_AT_COLUMN in table.c]


def install_updated_at_triggers(metadata: MetaData) -> None:
    """Attach trigger DDL to ``metadata`` so ``create_all`` emits it."""
    if metadata.info.get("updated_at_triggers_installed"):
        return

    event.listen(
        metadata,
        "before_create",
        DDL(POSTGRES_FUNCTION_SQL).execute_if(dialect="postgresql"),
    )
    for table in timestamped_tables(metadata):
        event.listen(table, "after_create", DDL(POSTGRES_TRIGGER_SQL).execute_if(dialect="postgresql"))
        event.listen(table, "after_create", DDL(SQLITE_TRIGGER_SQL).execute_if(dialect="sqlite"))
        logger.debug(f"Registered {trigger_name(table.name)} trigger")
    event.listen(
        metadata,
        "after_drop",
        DDL(POSTGRES_DROP_FUNCTION_SQL).execute_if(dialect="postgresql"),
    )

    metadata.info["updated_at_triggers_installed"] = True
