"""Cliente HTTP assíncrono da API da padaria."""

from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from padaria.db.models import ProdutoPublic


class ApiError(Exception):
    """Resposta de erro da API, com a mensagem enviada pelo servidor."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PadariaApi:
    """
    Chamadas às quatro rotas da API.

    Sem timeout e sem novas tentativas: cada falha é repassada uma única vez.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=None
        )

    async def __aenter__(self) -> "PadariaApi":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _payload(response: httpx.Response, fallback: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(fallback, response.status_code) from e
        if not isinstance(data, dict):
            raise ApiError(fallback, response.status_code)
        if response.is_error:
            raise ApiError(data.get("message") or fallback, response.status_code)
        return data

    async def testar(self) -> dict[str, Any]:
        response = await self._client.get("/test")
        data = self._payload(response, "API retornou erro")
        if not data.get("success"):
            raise ApiError("API retornou erro", response.status_code)
        return data

    async def listar(self) -> list[ProdutoPublic]:
        """
        Busca todos os produtos (mais recentes primeiro).

        Raises:
            ApiError: Resposta de erro ou corpo inválido.
            httpx.HTTPError: Falha de transporte.
        """
        response = await self._client.get("/produtos")
        data = self._payload(response, "Erro ao buscar produtos")
        try:
            return [ProdutoPublic.model_validate(p) for p in data.get("data") or []]
        except ValidationError as e:
            raise ApiError("Erro ao buscar produtos", response.status_code) from e

    async def cadastrar(
        self, nome: str, preco: float, descricao: str | None = None
    ) -> ProdutoPublic:
        response = await self._client.post(
            "/produtos", json={"nome": nome, "preco": preco, "descricao": descricao}
        )
        data = self._payload(response, "Erro ao cadastrar produto")
        try:
            return ProdutoPublic.model_validate(data.get("data"))
        except ValidationError as e:
            raise ApiError("Erro ao cadastrar produto", response.status_code) from e

    async def excluir(self, produto_id: int) -> dict[str, Any]:
        response = await self._client.delete(f"/produtos/{produto_id}")
        return self._payload(response, "Erro ao excluir produto")
