"""Controlador da aplicação cliente: eventos da página, chamadas à API e render."""

import asyncio
import datetime
import itertools
import logging
import math
import re
from collections.abc import Awaitable, Callable
from zoneinfo import ZoneInfo

import httpx

from padaria.client.api import ApiError, PadariaApi
from padaria.client.config import ClientSettings
from padaria.client.state import (
    Banner,
    ClientState,
    Formulario,
    ListaFase,
    Notificacao,
    StatusConexao,
    TipoNotificacao,
)
from padaria.client.view import View, render

_FLOAT_PREFIX_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_float(texto: str) -> float | None:
    """Lê o número no início do texto, como parseFloat do navegador."""
    match = _FLOAT_PREFIX_RE.match(texto)
    return float(match.group()) if match else None


def _mensagem(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return str(exc) or exc.__class__.__name__


class ClientApplication:
    """
    Página do catálogo: mantém o estado e chama `render` a cada mudança.

    Os métodos que exibem notificações agendam a expiração no loop asyncio
    em execução, então devem ser chamados dentro dele.
    """

    def __init__(
        self,
        api: PadariaApi,
        settings: ClientSettings | None = None,
        on_render: Callable[[View], None] | None = None,
        state: ClientState | None = None,
    ) -> None:
        self.api = api
        self.settings = settings or ClientSettings()
        self.state = state or ClientState()
        self.on_render = on_render
        self.tz: datetime.tzinfo | None = (
            ZoneInfo(self.settings.TIMEZONE) if self.settings.TIMEZONE else None
        )
        self.view = render(self.state, self.tz)
        self._ids = itertools.count(1)

    def _render(self) -> None:
        self.view = render(self.state, self.tz)
        if self.on_render is not None:
            self.on_render(self.view)

    # --- Notificações e status ---

    def mostrar_notificacao(
        self,
        mensagem: str,
        tipo: TipoNotificacao = TipoNotificacao.INFO,
        duracao: float | None = None,
    ) -> Notificacao:
        notificacao = Notificacao(id=next(self._ids), mensagem=mensagem, tipo=tipo)
        self.state.notificacoes.append(notificacao)
        self._render()
        asyncio.get_running_loop().call_later(
            self.settings.TOAST_DURATION if duracao is None else duracao,
            self.fechar_notificacao,
            notificacao.id,
        )
        return notificacao

    def fechar_notificacao(self, notificacao_id: int) -> None:
        restantes = [n for n in self.state.notificacoes if n.id != notificacao_id]
        if len(restantes) != len(self.state.notificacoes):
            self.state.notificacoes = restantes
            self._render()

    def atualizar_status_conexao(self, status: StatusConexao, mensagem: str) -> None:
        self.state.banner = Banner(status=status, mensagem=mensagem)
        self._render()

    def _esconder_banner(self) -> None:
        if self.state.banner is not None:
            self.state.banner.visivel = False
            self._render()

    # --- Chamadas à API ---

    async def despachar(self, evento: Awaitable[object]) -> None:
        """
        Executa um evento da página. Erros não previstos viram uma
        notificação genérica em vez de derrubar o loop.
        """
        try:
            await evento
        except Exception:
            logging.exception("Erro não tratado")
            self.mostrar_notificacao(
                "Ocorreu um erro inesperado. Verifique o console.",
                TipoNotificacao.ERRO,
            )

    async def iniciar(self) -> None:
        """Carregamento da página: testa a conexão e busca os produtos em paralelo."""
        logging.info("Página carregada, iniciando aplicação...")
        await asyncio.gather(
            self.despachar(self.testar_conexao()),
            self.despachar(self.buscar_produtos()),
        )

    async def testar_conexao(self) -> bool:
        self.atualizar_status_conexao(
            StatusConexao.LOADING, "Verificando conexão com a API..."
        )
        try:
            await self.api.testar()
        except (ApiError, httpx.HTTPError) as e:
            logging.error("Erro ao testar conexão: %s", _mensagem(e))
            self.atualizar_status_conexao(
                StatusConexao.OFFLINE,
                "Erro de conexão. Verifique se o backend está rodando.",
            )
            self.mostrar_notificacao(
                "Erro de conexão com a API. Verifique se o backend está rodando.",
                TipoNotificacao.ERRO,
            )
            return False

        self.atualizar_status_conexao(
            StatusConexao.ONLINE, "Conectado com sucesso à API!"
        )
        asyncio.get_running_loop().call_later(
            self.settings.BANNER_HIDE_DELAY, self._esconder_banner
        )
        return True

    async def buscar_produtos(self) -> None:
        logging.info("Buscando produtos...")
        self.state.fase = ListaFase.LOADING
        self._render()
        try:
            produtos = await self.api.listar()
        except (ApiError, httpx.HTTPError) as e:
            logging.error("Erro ao buscar produtos: %s", _mensagem(e))
            self.state.fase = ListaFase.ERROR
            self.mostrar_notificacao(
                f"Erro ao carregar produtos: {_mensagem(e)}", TipoNotificacao.ERRO
            )
            return

        self.state.produtos = produtos
        self.state.fase = ListaFase.POPULATED if produtos else ListaFase.EMPTY
        logging.info("%d produtos encontrados", len(produtos))
        self._render()

    # --- Formulário de cadastro ---

    def preencher_formulario(
        self, nome: str = "", preco: str = "", descricao: str = ""
    ) -> None:
        self.state.formulario = Formulario(nome=nome, preco=preco, descricao=descricao)
        self.state.campo_em_foco = None
        self._render()

    def _toggle_loading_cadastro(self, loading: bool) -> None:
        self.state.cadastrando = loading
        self._render()

    async def enviar_formulario(self) -> None:
        """
        Envio do formulário: valida localmente e só então chama a API.
        """
        formulario = self.state.formulario
        nome = formulario.nome.strip()
        preco = parse_float(formulario.preco)
        descricao = formulario.descricao.strip() or None

        if not nome:
            self.mostrar_notificacao(
                "Nome do produto é obrigatório", TipoNotificacao.ERRO
            )
            self.state.campo_em_foco = "nome"
            self._render()
            return
        if not preco or not math.isfinite(preco) or preco <= 0:
            self.mostrar_notificacao(
                "Preço deve ser maior que zero", TipoNotificacao.ERRO
            )
            self.state.campo_em_foco = "preco"
            self._render()
            return

        self._toggle_loading_cadastro(True)
        try:
            await self.cadastrar_produto(nome, preco, descricao)
        finally:
            self._toggle_loading_cadastro(False)

    async def cadastrar_produto(
        self, nome: str, preco: float, descricao: str | None
    ) -> None:
        logging.info("Cadastrando produto: %s", nome)
        try:
            produto = await self.api.cadastrar(nome, preco, descricao)
        except (ApiError, httpx.HTTPError) as e:
            logging.error("Erro ao cadastrar produto: %s", _mensagem(e))
            self.mostrar_notificacao(
                f"Erro ao cadastrar produto: {_mensagem(e)}", TipoNotificacao.ERRO
            )
            return

        logging.info("Produto cadastrado: id=%s", produto.id)
        self.mostrar_notificacao(
            "Produto cadastrado com sucesso!", TipoNotificacao.SUCESSO
        )
        self.state.formulario = Formulario()
        await self.buscar_produtos()

    # --- Exclusão em duas etapas ---

    def clicar_excluir(self, produto_id: str | None, nome: str | None) -> None:
        """Clique no botão de excluir de um cartão."""
        if not produto_id:
            logging.error("ID do produto não encontrado no botão")
            self.mostrar_notificacao(
                "Erro: ID do produto não encontrado", TipoNotificacao.ERRO
            )
            return

        pk = parse_float(produto_id)
        if pk is None or not math.isfinite(pk) or int(pk) <= 0:
            logging.error("ID do produto inválido: %s", produto_id)
            self.mostrar_notificacao("Erro: ID do produto inválido", TipoNotificacao.ERRO)
            return

        self.confirmar_exclusao(int(pk), nome)

    def confirmar_exclusao(self, produto_id: int, nome: str | None) -> None:
        self.state.produto_para_excluir = produto_id
        self.state.nome_para_excluir = nome
        self._render()

    def cancelar_exclusao(self) -> None:
        self.state.produto_para_excluir = None
        self.state.nome_para_excluir = None
        self._render()

    def clicar_fora_do_modal(self) -> None:
        if self.state.modal_aberto:
            self.cancelar_exclusao()

    def pressionar_tecla(self, tecla: str) -> None:
        if tecla == "Escape" and self.state.modal_aberto:
            self.cancelar_exclusao()

    async def executar_exclusao(self) -> None:
        """Confirmação no modal: fecha o modal antes de chamar a API."""
        if self.state.produto_para_excluir:
            produto_id = self.state.produto_para_excluir
            self.cancelar_exclusao()
            await self.excluir_produto(produto_id)

    async def excluir_produto(self, produto_id: int) -> None:
        if not produto_id or produto_id <= 0:
            self.mostrar_notificacao(
                "Erro ao excluir produto: ID do produto inválido", TipoNotificacao.ERRO
            )
            return

        local = next((p for p in self.state.produtos if p.id == produto_id), None)
        nome_local = local.nome if local else "sem nome"

        logging.info("Excluindo produto ID: %s", produto_id)
        try:
            data = await self.api.excluir(produto_id)
        except (ApiError, httpx.HTTPError) as e:
            logging.error("Erro ao excluir produto: %s", _mensagem(e))
            self.mostrar_notificacao(
                f"Erro ao excluir produto: {_mensagem(e)}", TipoNotificacao.ERRO
            )
            return

        aninhado = data.get("data")
        nome = (
            data.get("nome")
            or (aninhado.get("nome") if isinstance(aninhado, dict) else None)
            or nome_local
        )
        self.mostrar_notificacao(
            f'Produto "{nome}" excluído com sucesso!', TipoNotificacao.SUCESSO
        )
        await self.buscar_produtos()
