"""Baseline stamp - schema created by the backend/scripts patches.

No DDL is executed here. Run `alembic stamp 0001_baseline` on a database
whose tables already exist so later revisions apply on top of it.

Revision ID: 0001_baseline
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union

revision: str = "0001_baseline"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    pass


def downgrade() -> None:
    pass
