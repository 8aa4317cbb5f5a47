"""Camada de serviço: acesso ao banco hospedado para a tabela de produtos."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from padaria.db.models import Produto


class StoreError(Exception):
    """Falha reportada pelo banco, com mensagem legível."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _column(field: str) -> Any:
    if field not in Produto.model_fields:
        raise StoreError(f'Coluna "{field}" não existe em produtos')
    return getattr(Produto, field)


def _store_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


async def list_products(
    session: AsyncSession, order_by: str = "created_at", descending: bool = True
) -> Sequence[Produto]:
    """
    Retorna todos os produtos ordenados.

    Args:
        session: Sessão do banco de dados.
        order_by: Coluna de ordenação.
        descending: Se True, do mais novo para o mais antigo.

    Returns:
        Sequência de objetos Produto.

    Raises:
        StoreError: Se o banco retornar erro.
    """
    column = _column(order_by)
    if descending:
        statement = select(Produto).order_by(column.desc(), Produto.id.desc())  # type: ignore[union-attr]
    else:
        statement = select(Produto).order_by(column.asc(), Produto.id.asc())  # type: ignore[union-attr]
    try:
        result = await session.execute(statement)
    except SQLAlchemyError as e:
        raise StoreError(_store_message(e)) from e
    return result.scalars().all()


async def create_product(
    session: AsyncSession, nome: str, preco: float, descricao: str | None
) -> Produto:
    """
    Insere um novo produto no banco de dados.

    O registro é gravado por inteiro ou não é gravado: em caso de erro a
    transação é desfeita.

    Args:
        session: Sessão do banco de dados.
        nome: Nome do produto, já sem espaços nas pontas.
        preco: Preço maior que zero.
        descricao: Descrição opcional.

    Returns:
        O produto criado, com id e created_at preenchidos.

    Raises:
        StoreError: Se o banco recusar a inserção.
    """
    db_product = Produto(nome=nome, preco=preco, descricao=descricao)
    session.add(db_product)
    try:
        await session.commit()
        await session.refresh(db_product)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StoreError(_store_message(e)) from e
    return db_product


async def select_one_by(
    session: AsyncSession, field: str, value: Any
) -> Produto | None:
    """
    Busca um único produto pelo valor de uma coluna.

    Returns:
        Objeto Produto ou None, se não houver registro.

    Raises:
        StoreError: Se o banco retornar erro.
    """
    statement = select(Produto).where(_column(field) == value).limit(1)
    try:
        result = await session.execute(statement)
    except SQLAlchemyError as e:
        raise StoreError(_store_message(e)) from e
    return result.scalars().first()


async def delete_by(session: AsyncSession, field: str, value: Any) -> int:
    """
    Remove os produtos cuja coluna tem o valor informado.

    Returns:
        Quantidade de linhas removidas.

    Raises:
        StoreError: Se o banco retornar erro.
    """
    statement = delete(Produto).where(_column(field) == value)
    try:
        result = await session.execute(statement)
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        raise StoreError(_store_message(e)) from e
    return result.rowcount or 0
