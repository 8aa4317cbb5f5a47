"""Rota de teste de conectividade da API."""

import datetime

from fastapi import APIRouter

router = APIRouter()


@router.get("/test")
async def handle_test() -> dict[str, object]:
    """
    Confirma que a API está no ar. Não acessa o banco.
    """
    return {
        "success": True,
        "message": "API funcionando perfeitamente!",
        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
    }
