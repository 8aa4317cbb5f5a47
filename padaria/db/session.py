"""Configuração da sessão do banco de dados."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from padaria.core.config import settings

# "Motor" assíncrono do SQLAlchemy, gerencia as conexões com o banco hospedado.
async_engine = create_async_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,  # Verifica se a conexão está viva antes de usá-la
)

# Fábrica de sessões assíncronas, uma sessão por requisição.
AsyncSessionFactory = async_sessionmaker(
    async_engine,
    autoflush=False,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependência (dependency) que fornece uma sessão do banco de dados.

    Yields:
        Objeto de sessão assíncrona do SQLAlchemy.
    """
    async with AsyncSessionFactory() as session:
        yield session
