"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta del JSON de la API sin escribir parsers a mano.
- Un único lugar describe la forma del wire format (`Raw*`) y la forma que
  consume la UI (`ClientProfile`).

Nota:
- Los modelos `Raw*` solo viven durante un parseo; después se descartan.
- `ClientProfile` es inmutable (frozen): la UI lo lee, nunca lo modifica.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.config import ConfigDict


class RawClientSummary(BaseModel):
    """Un elemento del array `clients`."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    id: int = Field(
        ...,
        description="Identificador del cliente (único dentro de una respuesta).",
    )
    label: str = Field(
        ...,
        description="Etiqueta mostrada en la fila de la lista.",
    )
    is_manager: bool = Field(
        ...,
        alias="isManager",
        description="Indica si el cliente es manager.",
    )


class RawClientDetail(BaseModel):
    """Un valor del diccionario `data` (clave = id como string)."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(default="", description="Nombre completo del cliente.")
    address: str = Field(default="", description="Dirección postal.")
    points: int = Field(default=0, description="Puntos acumulados.")


class RawClientsResponse(BaseModel):
    """Respuesta completa: `{"clients": [...], "data": {...}, "label": "..."}`."""

    model_config = ConfigDict(strict=True, extra="ignore")

    clients: list[RawClientSummary] = Field(
        ...,
        description="Resumen de clientes, en el orden en que se mostrarán.",
    )
    data: dict[str, RawClientDetail] = Field(
        default_factory=dict,
        description="Detalles indexados por el id decimal del cliente.",
    )
    label: str = Field(
        default="",
        description="Etiqueta global de la respuesta (no se usa por fila).",
    )

    @field_validator("data", "label", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            return {} if info.field_name == "data" else ""
        return value


class ClientProfile(BaseModel):
    """Registro plano listo para la UI (resumen + detalle).

    Por qué existe:
    - La API reparte cada cliente en dos estructuras; la UI necesita una sola.
    - Los campos de detalle tienen defaults para clientes sin registro en `data`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Identificador copiado del resumen.")
    label: str = Field(..., description="Etiqueta copiada del resumen.")
    is_manager: bool = Field(
        ...,
        alias="isManager",
        description="Flag de manager copiado del resumen.",
    )
    name: str = Field(default="", description="Nombre (vacío si no hay detalle).")
    address: str = Field(default="", description="Dirección (vacía si no hay detalle).")
    points: int = Field(default=0, description="Puntos (0 si no hay detalle).")
