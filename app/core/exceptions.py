import re
from typing import Optional, Sequence
from sqlalchemy import PrimaryKeyConstraint, UniqueConstraint
from sqlalchemy.exc import IntegrityError
from app.core.database import Base


class DataIntegrityError(Exception):
    """A write rejected by a database constraint.

    ``constraint`` is the constraint name when the engine reports it or when it
    can be resolved from the model metadata, otherwise ``None``.
    """

    kind = "integrity"

    def __init__(self, message: str, *, constraint: Optional[str] = None, table: Optional[str] = None,
                 orig: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.constraint = constraint
        self.table = table
        self.orig = orig

    def __str__(self) -> str:
        if self.constraint:
            return f"{self.kind} violation on {self.constraint}: {self.message}"
        return f"{self.kind} violation: {self.message}"


class UniqueViolation(DataIntegrityError):
    kind = "unique"


class CheckViolation(DataIntegrityError):
    kind = "check"


class ForeignKeyViolation(DataIntegrityError):
    kind = "foreign key"


class NotNullViolation(DataIntegrityError):
    kind = "not null"


_PG_SQLSTATES = {
    "23505": UniqueViolation,
    "23514": CheckViolation,
    "23503": ForeignKeyViolation,
    "23502": NotNullViolation,
}

_SQLITE_PATTERNS = [
    (re.compile(r"UNIQUE constraint failed: (?P<columns>.+)"), UniqueViolation),
    (re.compile(r"CHECK constraint failed: (?P<name>\S+)"), CheckViolation),
    (re.compile(r"FOREIGN KEY constraint failed"), ForeignKeyViolation),
    (re.compile(r"NOT NULL constraint failed: (?P<columns>.+)"), NotNullViolation),
]


def _split_qualified_columns(columns: str) -> tuple[Optional[str], list[str]]:
    table = None
    names = []
    for qualified in columns.split(","):
        qualified = qualified.strip()
        if "." in qualified:
            table, column = qualified.split(".", 1)
        else:
            column = qualified
        names.append(column)
    return table, names


def _resolve_unique_name(table_name: Optional[str], columns: Sequence[str]) -> Optional[str]:
    table = Base.metadata.tables.get(table_name) if table_name else None
    if table is None:
        return None
    wanted = set(columns)
    for constraint in table.constraints:
        if isinstance(constraint, (UniqueConstraint, PrimaryKeyConstraint)):
            if {c.name for c in constraint.columns} == wanted:
                return constraint.name
    for index in table.indexes:
        if index.unique and {c.name for c in index.columns} == wanted:
            return index.name
    return None


def _from_postgres(exc: IntegrityError, orig: BaseException) -> Optional[DataIntegrityError]:
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    error_cls = _PG_SQLSTATES.get(sqlstate)
    if error_cls is None:
        return None
    diag = getattr(orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    table = getattr(diag, "table_name", None)
    if error_cls is NotNullViolation and constraint is None:
        column = getattr(diag, "column_name", None)
        constraint = f"{table}.{column}" if table and column else None
    message = (getattr(diag, "message_primary", None) or str(orig)).strip()
    return error_cls(message, constraint=constraint, table=table, orig=exc)


def _from_sqlite(exc: IntegrityError, orig: BaseException) -> Optional[DataIntegrityError]:
    message = str(orig)
    for pattern, error_cls in _SQLITE_PATTERNS:
        match = pattern.search(message)
        if not match:
            continue
        groups = match.groupdict()
        if "columns" in groups:
            table, columns = _split_qualified_columns(groups["columns"])
            if error_cls is UniqueViolation:
                constraint = _resolve_unique_name(table, columns)
            else:
                constraint = f"{table}.{columns[0]}" if table else None
            return error_cls(message, constraint=constraint, table=table, orig=exc)
        return error_cls(message, constraint=groups.get("name"), orig=exc)
    return None


def translate_integrity_error(exc: IntegrityError) -> DataIntegrityError:
    """Map a driver-level ``IntegrityError`` onto a typed violation."""
    orig = exc.orig if exc.orig is not None else exc
    translated = _from_postgres(exc, orig) or _from_sqlite(exc, orig)
    if translated is None:
        translated = DataIntegrityError(str(orig), orig=exc)
    return translated
