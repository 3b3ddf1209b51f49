"""Interfaces/abstracciones del Core.

Por qué:
- `ClientSource` es el único contrato: de dónde sale el JSON de clientes.
- El roster depende de la abstracción; httpx queda en `adapters/`.
"""
