"""Configurações do servidor da API."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Carrega as configurações do arquivo .env.

    Atributos:
        model_config: Configuração para os modelos Pydantic.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Banco de dados (Postgres hospedado)
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    POSTGRES_HOST: str
    POSTGRES_PORT: int = 5432
    # URL completa; quando definida, substitui os campos POSTGRES_*
    DATABASE_URL: str | None = None

    # Servidor HTTP
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        """
        Monta a string de conexão com o PostgreSQL.

        Returns:
            String de conexão para o SQLAlchemy.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def base_url(self) -> str:
        """URL local do servidor, usada nas mensagens de inicialização."""
        return f"http://localhost:{self.PORT}"


settings = Settings()  # type: ignore[call-arg]
