"""Testes das rotas REST de produtos."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from padaria.main import AVAILABLE_ROUTES
from padaria.services import product_service
from padaria.services.product_service import StoreError


async def test_health_check(client: httpx.AsyncClient) -> None:
    response = await client.get("/api/test")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "API funcionando perfeitamente!"
    assert body["timestamp"]


async def test_list_empty(client: httpx.AsyncClient) -> None:
    response = await client.get("/api/produtos")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [], "total": 0}


async def test_create_then_list_newest_first(client: httpx.AsyncClient) -> None:
    await client.post("/api/produtos", json={"nome": "Broa", "preco": 3})
    response = await client.post("/api/produtos", json={"nome": "Pão", "preco": 5.5})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Produto cadastrado com sucesso!"
    produto = body["data"]
    assert produto["nome"] == "Pão"
    assert produto["preco"] == 5.5
    assert isinstance(produto["id"], int) and produto["id"] > 0
    assert produto["created_at"]

    listagem = (await client.get("/api/produtos")).json()
    assert listagem["total"] == 2
    assert listagem["data"][0]["id"] == produto["id"]
    assert listagem["data"][1]["nome"] == "Broa"


async def test_create_trims_fields_and_coerces_price(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/produtos",
        json={"nome": "  Sonho  ", "preco": "4.25", "descricao": "  Com creme "},
    )

    assert response.status_code == 201
    produto = response.json()["data"]
    assert produto["nome"] == "Sonho"
    assert produto["preco"] == 4.25
    assert produto["descricao"] == "Com creme"


async def test_create_blank_description_stored_as_null(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/produtos", json={"nome": "Rosca", "preco": 9, "descricao": "   "}
    )

    assert response.status_code == 201
    assert response.json()["data"]["descricao"] is None


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"preco": 5.5}, "Nome e preço são obrigatórios"),
        ({"nome": "   ", "preco": 5.5}, "Nome e preço são obrigatórios"),
        ({"nome": "Pão"}, "Nome e preço são obrigatórios"),
        ({"nome": "Pão", "preco": 0}, "Nome e preço são obrigatórios"),
        ({"nome": "Pão", "preco": -1}, "Preço deve ser um número maior que zero"),
        ({"nome": "Pão", "preco": "abc"}, "Preço deve ser um número maior que zero"),
        ({"nome": "Pão", "preco": "0"}, "Preço deve ser um número maior que zero"),
        ({"nome": "Pão", "preco": True}, "Preço deve ser um número maior que zero"),
    ],
)
async def test_create_validation_never_reaches_store(
    client: httpx.AsyncClient, payload: dict[str, object], message: str
) -> None:
    with patch.object(
        product_service, "create_product", new=AsyncMock()
    ) as create_mock:
        response = await client.post("/api/produtos", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": message}
    create_mock.assert_not_awaited()


async def test_create_store_error_is_400(client: httpx.AsyncClient) -> None:
    with patch.object(
        product_service,
        "create_product",
        new=AsyncMock(side_effect=StoreError("violates check constraint")),
    ):
        response = await client.post("/api/produtos", json={"nome": "Pão", "preco": 5})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Erro ao cadastrar produto",
        "error": "violates check constraint",
    }


async def test_list_store_error_is_400(client: httpx.AsyncClient) -> None:
    with patch.object(
        product_service,
        "list_products",
        new=AsyncMock(side_effect=StoreError("connection refused")),
    ):
        response = await client.get("/api/produtos")

    assert response.status_code == 400
    assert response.json()["error"] == "connection refused"
    assert response.json()["message"] == "Erro ao buscar produtos"


async def test_malformed_body_is_500(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/produtos",
        content=b"{nome: ",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Erro interno do servidor"
    assert "error" in body


async def test_non_object_body_is_500(client: httpx.AsyncClient) -> None:
    response = await client.post("/api/produtos", json=["Pão", 5.5])

    assert response.status_code == 500


async def test_delete_existing_product(
    client: httpx.AsyncClient, session: AsyncSession
) -> None:
    alvo = await product_service.create_product(session, "Croissant", 8.0, None)
    outro = await product_service.create_product(session, "Rosca", 9.0, None)

    response = await client.delete(f"/api/produtos/{alvo.id}")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": 'Produto "Croissant" excluído com sucesso!',
        "nome": "Croissant",
    }
    restantes = (await client.get("/api/produtos")).json()["data"]
    assert [p["id"] for p in restantes] == [outro.id]


async def test_delete_missing_product_is_404(
    client: httpx.AsyncClient, session: AsyncSession
) -> None:
    await product_service.create_product(session, "Croissant", 8.0, None)

    response = await client.delete("/api/produtos/999999")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Produto não encontrado"}
    assert (await client.get("/api/produtos")).json()["total"] == 1


async def test_delete_accepts_decimal_id(
    client: httpx.AsyncClient, session: AsyncSession
) -> None:
    alvo = await product_service.create_product(session, "Croissant", 8.0, None)

    response = await client.delete(f"/api/produtos/{alvo.id}.0")

    assert response.status_code == 200


async def test_delete_exponent_id_uses_integer_prefix(
    client: httpx.AsyncClient, session: AsyncSession
) -> None:
    alvo = await product_service.create_product(session, "Croissant", 8.0, None)
    assert alvo.id == 1

    response = await client.delete("/api/produtos/1e3")

    assert response.status_code == 200
    assert response.json()["nome"] == "Croissant"
    assert await product_service.list_products(session) == []


@pytest.mark.parametrize("produto_id", ["12abc", ".5", "inf"])
async def test_delete_rejects_non_numeric_id(
    client: httpx.AsyncClient, produto_id: str
) -> None:
    response = await client.delete(f"/api/produtos/{produto_id}")

    assert response.status_code == 400
    assert response.json()["message"] == "ID deve ser um número válido"


async def test_delete_invalid_id_is_400(client: httpx.AsyncClient) -> None:
    with patch.object(product_service, "select_one_by", new=AsyncMock()) as lookup:
        response = await client.delete("/api/produtos/abc")

    assert response.status_code == 400
    assert response.json()["message"] == "ID deve ser um número válido"
    lookup.assert_not_awaited()


async def test_delete_lookup_error_is_400(client: httpx.AsyncClient) -> None:
    with (
        patch.object(
            product_service,
            "select_one_by",
            new=AsyncMock(side_effect=StoreError("timeout")),
        ),
        patch.object(product_service, "delete_by", new=AsyncMock()) as delete_mock,
    ):
        response = await client.delete("/api/produtos/1")

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Erro ao buscar produto antes de excluir",
        "error": "timeout",
    }
    delete_mock.assert_not_awaited()


async def test_delete_store_error_is_400(
    client: httpx.AsyncClient, session: AsyncSession
) -> None:
    alvo = await product_service.create_product(session, "Croissant", 8.0, None)

    with patch.object(
        product_service,
        "delete_by",
        new=AsyncMock(side_effect=StoreError("permission denied")),
    ):
        response = await client.delete(f"/api/produtos/{alvo.id}")

    assert response.status_code == 400
    assert response.json()["message"] == "Erro ao excluir produto"
    assert response.json()["error"] == "permission denied"


async def test_repeated_lists_are_identical(
    client: httpx.AsyncClient, session: AsyncSession
) -> None:
    for nome in ("Broa", "Sonho", "Rosca"):
        await product_service.create_product(session, nome, 2.0, None)

    primeira = (await client.get("/api/produtos")).json()
    segunda = (await client.get("/api/produtos")).json()

    assert primeira == segunda


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/nada"),
        ("GET", "/"),
        ("PUT", "/api/produtos"),
        ("PATCH", "/api/produtos/1"),
    ],
)
async def test_unmatched_routes_fall_through_to_404(
    client: httpx.AsyncClient, method: str, path: str
) -> None:
    response = await client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Rota não encontrada",
        "availableRoutes": AVAILABLE_ROUTES,
    }
