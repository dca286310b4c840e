"""Alembic migration scripts for RICOAI."""
