"""Cria a tabela produtos.

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "produtos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=150), nullable=False),
        sa.Column("preco", sa.Float(), nullable=False),
        sa.Column("descricao", sa.String(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("preco > 0", name="ck_produtos_preco_positivo"),
    )
    op.create_index("ix_produtos_created_at", "produtos", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_produtos_created_at", table_name="produtos")
    op.drop_table("produtos")
