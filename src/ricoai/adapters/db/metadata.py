"""Shared SQLAlchemy `MetaData` with a naming convention.

Every RICOAI table attaches to this object so that constraints and indexes
get deterministic names, which Alembic autogenerate and the migration
scripts rely on.

Naming convention:
    - Indexes:       ix_<table>_<col...>
    - Unique:        uq_<table>_<col...>
    - Check:         ck_<table>_<constraint_name>
    - Foreign keys:  fk_<table>_<col...>_<reftable>
    - Primary key:   pk_<table>
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_name)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)
