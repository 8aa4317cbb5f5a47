"""Formatação de moeda e data no padrão pt-BR."""

import datetime
import re
from decimal import ROUND_HALF_UP, Decimal

NBSP = "\xa0"

_MOEDA_RE = re.compile(r"^(-?)R\$\s?([\d.]+),(\d{2})$")


def formatar_moeda(valor: float) -> str:
    """
    Formata um valor em reais, como Intl.NumberFormat('pt-BR', BRL).

    Arredonda meio centavo para longe do zero a partir da menor
    representação decimal do número (0.125 -> 0,13).

    >>> formatar_moeda(1234.5)
    'R$\\xa01.234,50'
    """
    centavos = Decimal(repr(float(valor))).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )
    texto = f"{abs(centavos):,.2f}"
    # 1,234.50 -> 1.234,50
    texto = texto.replace(",", "_").replace(".", ",").replace("_", ".")
    sinal = "-" if centavos < 0 else ""
    return f"{sinal}R${NBSP}{texto}"


def parse_moeda(texto: str) -> float:
    """Inverso de formatar_moeda."""
    match = _MOEDA_RE.match(texto.replace(NBSP, " "))
    if match is None:
        raise ValueError(f"Valor monetário inválido: {texto!r}")
    sinal, inteiro, centavos = match.groups()
    valor = float(f"{inteiro.replace('.', '')}.{centavos}")
    return -valor if sinal else valor


def formatar_data(
    data: str | datetime.datetime, tz: datetime.tzinfo | None = None
) -> str:
    """
    Formata a data de criação como "dd/mm/aaaa, HH:MM".

    Datas sem fuso são tratadas como UTC. Sem `tz`, converte para o fuso
    local da máquina.
    """
    if isinstance(data, str):
        data = datetime.datetime.fromisoformat(data)
    if data.tzinfo is None:
        data = data.replace(tzinfo=datetime.UTC)
    return data.astimezone(tz).strftime("%d/%m/%Y, %H:%M")
