"""Modelos de banco de dados do projeto."""

import datetime

from sqlalchemy import CheckConstraint, DateTime, func
from sqlmodel import Field, SQLModel


class ProdutoBase(SQLModel):
    """Campos informados pelo usuário no cadastro."""

    nome: str = Field(max_length=150)
    preco: float
    descricao: str | None = Field(default=None)


class Produto(ProdutoBase, table=True):
    """Produto do catálogo da padaria."""

    __tablename__ = "produtos"
    __table_args__ = (
        CheckConstraint("preco > 0", name="ck_produtos_preco_positivo"),
    )

    id: int | None = Field(default=None, primary_key=True)
    # Preenchido pelo banco no INSERT; None até o refresh após o commit
    created_at: datetime.datetime | None = Field(
        default=None,
        sa_type=DateTime(timezone=True),  # type: ignore[call-overload]
        sa_column_kwargs={"server_default": func.now()},
        nullable=False,
        index=True,
    )


class ProdutoPublic(ProdutoBase):
    """Produto como trafega na API (id e data sempre presentes)."""

    id: int
    created_at: datetime.datetime
