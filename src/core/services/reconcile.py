"""Client data reconciliation.

The endpoint splits every client across two structures: the ordered
`clients` array (id, label, manager flag) and the `data` mapping keyed by the
decimal id (name, address, points). This module parses the body strictly and
joins both halves into one `ClientProfile` per summary, in a single pass.

Clients without a detail record are ordinary: they receive empty name and
address and zero points. Detail records whose key matches no summary are
ignored.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from core.domain.errors import ParseError
from core.domain.models import ClientProfile, RawClientDetail, RawClientsResponse

logger = logging.getLogger(__name__)

_MISSING_DETAIL = RawClientDetail()


def _format_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def parse_response(raw_json_text: str) -> RawClientsResponse:
    """Parse the response body, raising `ParseError` on any structural problem."""

    try:
        return RawClientsResponse.model_validate_json(raw_json_text)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        locations = [_format_location(err["loc"]) for err in errors]
        first = errors[0] if errors else None
        if first is not None and first["type"] == "json_invalid":
            message = f"Malformed JSON: {first['msg']}"
        elif first is not None:
            message = f"Invalid client data at {locations[0]}: {first['msg']}"
        else:
            message = "Invalid client data"
        logger.debug("Rejected client payload (%d errors): %s", len(errors), locations)
        raise ParseError(message, locations=locations) from exc


def merge_profiles(response: RawClientsResponse) -> list[ClientProfile]:
    """Join summaries with their detail records, keeping the summary order."""

    profiles: list[ClientProfile] = []
    defaulted = 0
    for summary in response.clients:
        detail = response.data.get(str(summary.id))
        if detail is None:
            detail = _MISSING_DETAIL
            defaulted += 1
        profiles.append(
            ClientProfile(
                id=summary.id,
                label=summary.label,
                is_manager=summary.is_manager,
                name=detail.name,
                address=detail.address,
                points=detail.points,
            )
        )

    logger.info(
        "Reconciled %d clients (%d detail records, %d without details)",
        len(profiles),
        len(response.data),
        defaulted,
    )
    return profiles


def reconcile(raw_json_text: str) -> list[ClientProfile]:
    """Parse a response body and flatten it into client profiles."""

    return merge_profiles(parse_response(raw_json_text))
