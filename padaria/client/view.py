"""Camada de visualização: converte o estado do cliente em uma View."""

import datetime
from dataclasses import dataclass

from padaria.client.formatting import formatar_data, formatar_moeda
from padaria.client.state import ClientState, ListaFase, StatusConexao, TipoNotificacao
from padaria.db.models import ProdutoPublic

ICONES_STATUS = {
    StatusConexao.ONLINE: "✅",
    StatusConexao.OFFLINE: "❌",
    StatusConexao.LOADING: "⏳",
}

ICONES_NOTIFICACAO = {
    TipoNotificacao.SUCESSO: "✅",
    TipoNotificacao.ERRO: "❌",
    TipoNotificacao.INFO: "ℹ️",
}


@dataclass(frozen=True)
class BannerView:
    visivel: bool
    status: str | None = None
    icone: str = ""
    texto: str = ""


@dataclass(frozen=True)
class CardView:
    """Cartão de um produto; `produto_id` e `nome` vão para o botão de excluir."""

    produto_id: int
    nome: str
    preco: str
    descricao: str | None
    criado_em: str


@dataclass(frozen=True)
class ModalView:
    aberto: bool
    nome: str | None = None


@dataclass(frozen=True)
class BotaoCadastrarView:
    desabilitado: bool
    texto_visivel: bool
    loading_visivel: bool


@dataclass(frozen=True)
class NotificacaoView:
    id: int
    tipo: str
    icone: str
    mensagem: str


@dataclass(frozen=True)
class View:
    banner: BannerView
    loading_visivel: bool
    grid_visivel: bool
    vazio_visivel: bool
    contador_visivel: bool
    total: int
    cards: tuple[CardView, ...]
    modal: ModalView
    botao_cadastrar: BotaoCadastrarView
    notificacoes: tuple[NotificacaoView, ...]
    campo_em_foco: str | None


def render_card(produto: ProdutoPublic, tz: datetime.tzinfo | None = None) -> CardView:
    return CardView(
        produto_id=produto.id,
        nome=produto.nome,
        preco=formatar_moeda(produto.preco),
        descricao=produto.descricao or None,
        criado_em=formatar_data(produto.created_at, tz),
    )


def render(state: ClientState, tz: datetime.tzinfo | None = None) -> View:
    """
    Monta a View a partir do estado. Função pura: chamada de novo a cada
    mudança de estado.

    Args:
        state: Estado atual do cliente.
        tz: Fuso para as datas dos cartões; None usa o fuso local.

    Returns:
        A View completa da página.
    """
    fase = state.fase
    populada = fase is ListaFase.POPULATED

    if state.banner is None:
        banner = BannerView(visivel=False)
    else:
        banner = BannerView(
            visivel=state.banner.visivel,
            status=state.banner.status.value,
            icone=ICONES_STATUS[state.banner.status],
            texto=state.banner.mensagem,
        )

    return View(
        banner=banner,
        loading_visivel=fase is ListaFase.LOADING,
        grid_visivel=populada,
        vazio_visivel=fase in (ListaFase.EMPTY, ListaFase.ERROR),
        contador_visivel=populada,
        total=len(state.produtos),
        cards=tuple(render_card(p, tz) for p in state.produtos) if populada else (),
        modal=ModalView(aberto=state.modal_aberto, nome=state.nome_para_excluir),
        botao_cadastrar=BotaoCadastrarView(
            desabilitado=state.cadastrando,
            texto_visivel=not state.cadastrando,
            loading_visivel=state.cadastrando,
        ),
        notificacoes=tuple(
            NotificacaoView(
                id=n.id,
                tipo=n.tipo.value,
                icone=ICONES_NOTIFICACAO[n.tipo],
                mensagem=n.mensagem,
            )
            for n in state.notificacoes
        ),
        campo_em_foco=state.campo_em_foco,
    )
