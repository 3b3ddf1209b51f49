"""Fuente HTTP de clientes.

Fase 1:
- Un GET al endpoint configurado, sin reintentos.
- Devuelve el cuerpo crudo; el parseo vive en `core.services.reconcile`.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import TransportError
from core.interfaces.client_source import ClientSource

logger = logging.getLogger(__name__)


class ClientApiFetcher(ClientSource):
    """Obtiene el JSON de clientes desde la API remota."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._url = url or self._settings.clients_url
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def fetch_clients(self) -> str:
        logger.debug("Requesting client data from %s", self._url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(self._url)
        except httpx.HTTPError as exc:
            logger.warning("Client request failed: %s", exc)
            raise TransportError(str(exc) or type(exc).__name__, url=self._url) from exc

        if not response.is_success:
            message = f"HTTP {response.status_code} {response.reason_phrase}".strip()
            logger.warning("Client request failed: %s", message)
            raise TransportError(message, status_code=response.status_code, url=self._url)

        logger.debug("Received %d bytes of client data", len(response.content))
        return response.text
