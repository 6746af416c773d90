"""Initial schema - role_permission, user_permission, permission_audit.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role_permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("action", sa.String(32), nullable=False),
        sa.Column("resource", sa.String(255), nullable=True),
        sa.Column("granted", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_role_permission_role", "role_permission", ["role"])
    # NULLS NOT DISTINCT: one row per scope even when resource is unset (PostgreSQL 15+).
    op.execute(
        "CREATE UNIQUE INDEX ux_role_permission_scope ON role_permission "
        "(role, category, action, resource) NULLS NOT DISTINCT"
    )

    op.create_table(
        "user_permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("action", sa.String(32), nullable=False),
        sa.Column("resource", sa.String(255), nullable=True),
        sa.Column("granted", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("granted_by", sa.String(255), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("conditions", postgresql.JSONB(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_permission_user_id", "user_permission", ["user_id"])
    op.execute(
        "CREATE UNIQUE INDEX ux_user_permission_scope ON user_permission "
        "(user_id, category, action, resource) NULLS NOT DISTINCT"
    )

    op.create_table(
        "permission_audit",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("user_role", sa.String(32), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("action", sa.String(32), nullable=False),
        sa.Column("resource", sa.String(255), nullable=True),
        sa.Column("granted", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
    )
    op.create_index(
        "ix_permission_audit_user_created", "permission_audit", ["user_id", "created_at"]
    )
    op.create_index("ix_permission_audit_created", "permission_audit", ["created_at"])


def downgrade() -> None:
    op.drop_table("permission_audit")
    op.drop_table("user_permission")
    op.drop_table("role_permission")
