"""Add guardian fields to users

Revision ID: c5d07f3e9a12
Revises: 8b24e6d1c953
Create Date: 2025-09-18 21:15:03.550417

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "c5d07f3e9a12"
down_revision: Union[str, None] = "8b24e6d1c953"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Members under 18 register with a guardian
    op.add_column("users", sa.Column("guardian_name", sa.String(), nullable=True))
    op.add_column(
        "users", sa.Column("guardian_lastname", sa.String(), nullable=True)
    )
    op.add_column("users", sa.Column("guardian_phone", sa.String(), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("users") as batch_op:
        batch_op.drop_column("guardian_phone")
        batch_op.drop_column("guardian_lastname")
        batch_op.drop_column("guardian_name")
