from padaria.client.api import ApiError, PadariaApi
from padaria.client.app import ClientApplication
from padaria.client.config import ClientSettings
from padaria.client.state import ClientState, ListaFase
from padaria.client.view import View, render

__all__ = [
    "ApiError",
    "ClientApplication",
    "ClientSettings",
    "ClientState",
    "ListaFase",
    "PadariaApi",
    "View",
    "render",
]
