"""Arquivo principal da aplicação. Ponto de entrada da API."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from padaria.core.config import settings
from padaria.db.session import async_engine
from padaria.handlers import health, produtos

AVAILABLE_ROUTES = [
    "GET /api/test",
    "GET /api/produtos",
    "POST /api/produtos",
    "DELETE /api/produtos/:id",
]

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Gerencia o ciclo de vida da aplicação.
    """
    print("--- SERVIDOR PADARIA INICIADO ---")
    print(f"Servidor rodando na porta: {settings.PORT}")
    print(f"URL local: {settings.base_url}")
    print(f"API disponível em: {settings.base_url}/api")
    print("Rotas disponíveis:")
    for route in AVAILABLE_ROUTES:
        print(f"   {route}")

    yield

    print("--- LIFESPAN SHUTDOWN ---")
    await async_engine.dispose()
    print("--- LIFESPAN SHUTDOWN COMPLETE ---")


# --- Aplicação FastAPI ---
app = FastAPI(title="Padaria API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(produtos.router, prefix="/api")


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Rota padrão: qualquer caminho ou método sem rota vira 404 com a lista
    de rotas válidas.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            content={
                "success": False,
                "message": "Rota não encontrada",
                "availableRoutes": AVAILABLE_ROUTES,
            },
            status_code=404,
        )
    return JSONResponse(
        content={"success": False, "message": str(exc.detail)},
        status_code=exc.status_code,
    )


def run() -> None:
    uvicorn.run(
        "padaria.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )


# --- Ponto de entrada para execução local ---
if __name__ == "__main__":
    run()
