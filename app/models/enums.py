from sqlalchemy import Enum, MetaData, event
from sqlalchemy.dialects import postgresql
from app.core.constants import PROGRAM_TYPE_TYPE, ProgramTypeEnum, TYPE_COMMENTS, USER_ROLE_TYPE, UserRoleEnum


def enum_values(enum_cls):
    return [member.value for member in enum_cls]


def status_enum(enum_cls, name: str) -> Enum:
    # Stored by value ("in_moderation"), not by member name ("IN_MODERATION").
    # Native type on PostgreSQL, CHECK constraint elsewhere.
    return Enum(
        enum_cls,
        name=name,
        values_callable=enum_values,
        create_constraint=True,
    )


# Declared by the schema but not bound to any column; kept for consumers that
# cast to them directly.
STANDALONE_ENUM_TYPES = (
    postgresql.ENUM(*enum_values(UserRoleEnum), name=USER_ROLE_TYPE),
    postgresql.ENUM(*enum_values(ProgramTypeEnum), name=PROGRAM_TYPE_TYPE),
)


def create_standalone_types(target, connection, **kw):
    if connection.dialect.name != "postgresql":
        return
    for enum_type in STANDALONE_ENUM_TYPES:
        enum_type.create(bind=connection, checkfirst=True)


def drop_standalone_types(target, connection, **kw):
    if connection.dialect.name != "postgresql":
        return
    for enum_type in STANDALONE_ENUM_TYPES:
        enum_type.drop(bind=connection, checkfirst=True)


def type_comment_sql(type_name: str) -> str:
    return f"COMMENT ON TYPE {type_name} IS '{TYPE_COMMENTS[type_name]}'"


def comment_enum_types(target, connection, **kw):
    # Runs after the tables, once the status types bound to columns exist
    if connection.dialect.name != "postgresql":
        return
    for type_name in TYPE_COMMENTS:
        connection.exec_driver_sql(type_comment_sql(type_name))


def install_standalone_enum_types(metadata: MetaData) -> None:
    if event.contains(metadata, "before_create", create_standalone_types):
        return
    event.listen(metadata, "before_create", create_standalone_types)
    event.listen(metadata, "after_create", comment_enum_types)
    event.listen(metadata, "after_drop", drop_standalone_types)
