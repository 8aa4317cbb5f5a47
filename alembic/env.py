import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config
from sqlmodel import SQLModel

from alembic import context  # type: ignore[attr-defined]
from padaria.core.config import settings
from padaria.db import models  # noqa: F401

# Objeto de configuração do Alembic, com os valores do arquivo .ini em uso.
config = context.config

# Configura os loggers a partir do arquivo .ini.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Metadados dos modelos SQLModel, para a autogeração de migrações.
target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Executa as migrações em modo 'offline'.

    Configura o contexto apenas com a URL, sem criar um Engine;
    context.execute() escreve o SQL na saída.
    """
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    # A URL do .ini é substituída pela das configurações (.env)
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = settings.database_url

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    """
    Executa as migrações em modo 'online', com o driver assíncrono.
    """
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
