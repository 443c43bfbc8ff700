"""donation ownership, claimer ids and user counters

Revision ID: 0002_donation_owner_and_counters
Revises: 0001_init
Create Date: 2026-10-19 11:30:00.000000
"""

from alembic import op
import sqlalchemy as sa

revision = "0002_donation_owner_and_counters"
down_revision = "0001_init"
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table("users") as batch:
        batch.add_column(sa.Column("donations_made", sa.Integer(), nullable=False, server_default="0"))
        batch.add_column(sa.Column("claimed_donations", sa.Integer(), nullable=False, server_default="0"))

    # Free-text recipient names cannot be mapped to accounts.
    op.execute("UPDATE donations SET claimed_by = NULL")
    with op.batch_alter_table("donations") as batch:
        batch.alter_column("claimed_by", existing_type=sa.String(), type_=sa.Integer(), existing_nullable=True)
        batch.add_column(sa.Column("claimed_at", sa.DateTime(), nullable=True))
        batch.add_column(sa.Column("donated_by", sa.Integer(), nullable=True))
        batch.create_foreign_key("fk_donations_claimed_by_users", "users", ["claimed_by"], ["id"])
        batch.create_foreign_key("fk_donations_donated_by_users", "users", ["donated_by"], ["id"])


def downgrade() -> None:
    with op.batch_alter_table("donations") as batch:
        batch.drop_constraint("fk_donations_donated_by_users", type_="foreignkey")
        batch.drop_constraint("fk_donations_claimed_by_users", type_="foreignkey")
        batch.drop_column("donated_by")
        batch.drop_column("claimed_at")
        batch.alter_column("claimed_by", existing_type=sa.Integer(), type_=sa.String(), existing_nullable=True)

    with op.batch_alter_table("users") as batch:
        batch.drop_column("claimed_donations")
        batch.drop_column("donations_made")
