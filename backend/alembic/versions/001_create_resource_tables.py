"""Create users, composers, persons, teams and customers tables

Revision ID: 001
Revises: None
Create Date: 2023-10-03 00:00:00.000000+00:00

What:  Initial schema. Nested collections (roles, dependents, players,
       invoices, email addresses) are JSON columns (JSONB on PostgreSQL).
Note:  users.username and customers.username get UNIQUE indexes; the signup
       flow relies on the users index when concurrent signups race.

Rollback: downgrade() drops every table (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_json = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _id_column() -> sa.Column:
    return sa.Column("id", sa.Uuid(), nullable=False)


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.Text(), nullable=False, comment="Login name, unique across users"),
        sa.Column("password", sa.String(60), nullable=False, comment="bcrypt hash of the user's password"),
        sa.Column("email_addresses", _json, nullable=False, comment="Ordered contact records: [{email: str}]"),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "composers",
        _id_column(),
        sa.Column("first_name", sa.Text(), nullable=True),
        sa.Column("last_name", sa.Text(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "persons",
        _id_column(),
        sa.Column("first_name", sa.Text(), nullable=True),
        sa.Column("last_name", sa.Text(), nullable=True),
        sa.Column("roles", _json, nullable=False),
        sa.Column("dependents", _json, nullable=False),
        sa.Column("birth_date", sa.Text(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "teams",
        _id_column(),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("mascot", sa.Text(), nullable=True),
        sa.Column("players", _json, nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "customers",
        _id_column(),
        sa.Column("first_name", sa.Text(), nullable=True),
        sa.Column("last_name", sa.Text(), nullable=True),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("invoices", _json, nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_customers_username", "customers", ["username"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_customers_username", table_name="customers")
    op.drop_table("customers")
    op.drop_table("teams")
    op.drop_table("persons")
    op.drop_table("composers")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
