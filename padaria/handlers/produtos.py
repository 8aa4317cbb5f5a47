"""Rotas REST de produtos: listagem, cadastro e exclusão."""

import logging
import math
import re
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from padaria.db.session import get_db_session
from padaria.services import product_service
from padaria.services.product_service import StoreError

router = APIRouter()

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def _falha(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(content=content, status_code=status_code)


def _erro_interno(exc: Exception) -> JSONResponse:
    return _falha(500, "Erro interno do servidor", str(exc))


def _parse_preco(value: Any) -> float | None:
    """Converte o preço recebido para float; None se não for numérico."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")


def _parse_id(value: str) -> int | None:
    # Válido se o texto inteiro é numérico; o id é o prefixo inteiro ("1e3" -> 1)
    try:
        number = float(value)
    except ValueError:
        return None
    match = _INT_PREFIX_RE.match(value)
    if not math.isfinite(number) or match is None:
        return None
    return int(match.group(1))


@router.get("/produtos")
async def handle_list_products(session: SessionDep) -> JSONResponse:
    """
    Lista todos os produtos, do mais recente para o mais antigo.
    """
    try:
        logging.info("Buscando produtos...")
        try:
            produtos = await product_service.list_products(
                session, order_by="created_at", descending=True
            )
        except StoreError as e:
            logging.warning("Erro ao buscar produtos: %s", e.message)
            return _falha(400, "Erro ao buscar produtos", e.message)

        logging.info("%d produtos encontrados", len(produtos))
        return JSONResponse(
            content={
                "success": True,
                "data": [p.model_dump(mode="json") for p in produtos],
                "total": len(produtos),
            }
        )
    except Exception as e:
        logging.exception("Erro interno em handle_list_products")
        return _erro_interno(e)


@router.post("/produtos")
async def handle_create_product(request: Request, session: SessionDep) -> JSONResponse:
    """
    Cadastra um produto a partir de {nome, preco, descricao?}.

    A validação acontece antes de qualquer chamada ao banco.
    """
    try:
        body = await request.json()
        nome = body.get("nome")
        preco = body.get("preco")
        descricao = body.get("descricao")
        logging.info(
            "Cadastrando produto: nome=%r preco=%r descricao=%r", nome, preco, descricao
        )

        if not nome or not preco or (isinstance(nome, str) and not nome.strip()):
            return _falha(400, "Nome e preço são obrigatórios")

        valor = _parse_preco(preco)
        if valor is None or valor <= 0:
            return _falha(400, "Preço deve ser um número maior que zero")

        try:
            produto = await product_service.create_product(
                session,
                nome=nome.strip(),
                preco=valor,
                descricao=(descricao.strip() or None) if descricao else None,
            )
        except StoreError as e:
            logging.warning("Erro ao cadastrar produto: %s", e.message)
            return _falha(400, "Erro ao cadastrar produto", e.message)

        logging.info("Produto cadastrado com sucesso: id=%s", produto.id)
        return JSONResponse(
            content={
                "success": True,
                "message": "Produto cadastrado com sucesso!",
                "data": produto.model_dump(mode="json"),
            },
            status_code=201,
        )
    except Exception as e:
        logging.exception("Erro interno em handle_create_product")
        return _erro_interno(e)


@router.delete("/produtos/{produto_id}")
async def handle_delete_product(produto_id: str, session: SessionDep) -> JSONResponse:
    """
    Exclui um produto pelo id.

    O produto é lido antes da exclusão porque o DELETE não devolve a linha
    removida, e o nome entra na mensagem de confirmação.
    """
    try:
        logging.info("Excluindo produto ID: %s", produto_id)
        pk = _parse_id(produto_id)
        if pk is None:
            return _falha(400, "ID deve ser um número válido")

        try:
            produto = await product_service.select_one_by(session, "id", pk)
        except StoreError as e:
            logging.warning("Erro ao buscar produto antes de excluir: %s", e.message)
            return _falha(400, "Erro ao buscar produto antes de excluir", e.message)

        if produto is None:
            return _falha(404, "Produto não encontrado")

        nome = produto.nome
        try:
            await product_service.delete_by(session, "id", pk)
        except StoreError as e:
            logging.warning("Erro ao excluir produto: %s", e.message)
            return _falha(400, "Erro ao excluir produto", e.message)

        logging.info('Produto "%s" excluído com sucesso!', nome)
        return JSONResponse(
            content={
                "success": True,
                "message": f'Produto "{nome}" excluído com sucesso!',
                "nome": nome,
            }
        )
    except Exception as e:
        logging.exception("Erro interno em handle_delete_product")
        return _erro_interno(e)
