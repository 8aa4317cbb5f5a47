"""Configurações da aplicação cliente."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """
    Configurações do cliente, lidas de variáveis PADARIA_CLIENT_*.

    Atributos:
        API_BASE_URL: Endereço base da API (com o prefixo /api).
        BANNER_HIDE_DELAY: Segundos até esconder o aviso de conexão bem-sucedida.
        TOAST_DURATION: Segundos que uma notificação fica visível.
        TIMEZONE: Fuso para exibir datas; None usa o fuso local.
    """

    model_config = SettingsConfigDict(
        env_prefix="PADARIA_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    API_BASE_URL: str = "http://localhost:3000/api"
    BANNER_HIDE_DELAY: float = 3.0
    TOAST_DURATION: float = 5.0
    TIMEZONE: str | None = None
