"""Contrato de fuentes de datos de clientes.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el roster use la API real o un stub en tests sin acoplar el
  Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClientSource(Protocol):
    """Contrato mínimo para obtener el JSON de clientes.

    Reglas de diseño:
    - `fetch_clients` es asíncrono porque hace I/O (HTTP).
    - Devuelve el cuerpo crudo; interpretar el JSON es tarea de `reconcile`.
    - Los fallos de red se señalizan con `core.domain.errors.TransportError`.
    """

    async def fetch_clients(self) -> str:
        """Obtiene el cuerpo de la respuesta como texto."""

        ...
