"""Add image_path to sports

Revision ID: 8b24e6d1c953
Revises: 3f1a9c2b7d40
Create Date: 2025-09-02 10:47:35.918062

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8b24e6d1c953"
down_revision: Union[str, None] = "3f1a9c2b7d40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column("sports", sa.Column("image_path", sa.String(), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("sports") as batch_op:
        batch_op.drop_column("image_path")
