"""Initial schema: users, matieres, questions.

Revision ID: 001
Revises:
Create Date: Initial

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("password", sa.String(255), nullable=True),
        sa.Column("role", sa.String(30), nullable=True),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=False)

    # Unique index on id is what rejects a concurrent duplicate matiere
    op.create_table(
        "matieres",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(6), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index("ix_matieres_id", "matieres", ["id"], unique=True)

    # subject_id deliberately has no FK to matieres
    op.create_table(
        "questions",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("subject_id", sa.String(255), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("propositions", sa.JSON(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index("ix_questions_id", "questions", ["id"], unique=True)
    op.create_index("ix_questions_subject_id", "questions", ["subject_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_questions_subject_id", table_name="questions")
    op.drop_index("ix_questions_id", table_name="questions")
    op.drop_table("questions")
    op.drop_index("ix_matieres_id", table_name="matieres")
    op.drop_table("matieres")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")
