"""Estado explícito da aplicação cliente."""

import enum
from dataclasses import dataclass, field

from padaria.db.models import ProdutoPublic


class ListaFase(enum.Enum):
    """
    Estados da região da lista de produtos.

    Toda recarga volta para LOADING, de qualquer estado final.
    """

    LOADING = "loading"
    POPULATED = "populated"
    EMPTY = "empty"
    ERROR = "error"


class StatusConexao(enum.StrEnum):
    LOADING = "loading"
    ONLINE = "online"
    OFFLINE = "offline"


class TipoNotificacao(enum.StrEnum):
    SUCESSO = "sucesso"
    ERRO = "erro"
    INFO = "info"


@dataclass
class Banner:
    status: StatusConexao
    mensagem: str
    visivel: bool = True


@dataclass
class Notificacao:
    id: int
    mensagem: str
    tipo: TipoNotificacao = TipoNotificacao.INFO


@dataclass
class Formulario:
    """Valores digitados no formulário de cadastro, como texto."""

    nome: str = ""
    preco: str = ""
    descricao: str = ""


@dataclass
class ClientState:
    """
    Tudo o que a tela mostra.

    `produtos` espelha a última busca bem-sucedida. `produto_para_excluir`
    guarda o id alvo enquanto o modal de confirmação está aberto.
    """

    produtos: list[ProdutoPublic] = field(default_factory=list)
    fase: ListaFase = ListaFase.LOADING
    produto_para_excluir: int | None = None
    nome_para_excluir: str | None = None
    banner: Banner | None = None
    notificacoes: list[Notificacao] = field(default_factory=list)
    formulario: Formulario = field(default_factory=Formulario)
    cadastrando: bool = False
    campo_em_foco: str | None = None

    @property
    def modal_aberto(self) -> bool:
        return self.produto_para_excluir is not None
