import json
import logging
from typing import Any

from fastapi import status

from venue_dashboard.clients.membership_client import MembershipClient, MembershipTransportError
from venue_dashboard.contracts.members import (
    LookupFound,
    LookupNotFound,
    LookupResult,
    LookupTransportFailure,
    LookupUnrecognizedPayload,
    LookupUpstreamError,
    LookupUpstreamMalformed,
)

logger = logging.getLogger(__name__)

_LOGGED_BODY_CHARS = 200


class LookupValidationError(ValueError):
    pass


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant: {name}")


class MemberLookupService:
    def __init__(self, membership_client: MembershipClient):
        self._membership_client = membership_client

    async def lookup(self, mobile: Any, correlation_id: str) -> LookupResult:
        identifier = self._validated_identifier(mobile)

        try:
            upstream_status, body = await self._membership_client.lookup(
                mobile=identifier,
                correlation_id=correlation_id,
            )
        except MembershipTransportError as exc:
            logger.error("Member lookup transport failure: %s", exc)
            return LookupTransportFailure(reason=str(exc))

        if not status.HTTP_200_OK <= upstream_status < status.HTTP_300_MULTIPLE_CHOICES:
            logger.error(
                "Membership webhook returned error %s: %s",
                upstream_status,
                body[:_LOGGED_BODY_CHARS],
            )
            return LookupUpstreamError(status_code=upstream_status)

        if not body.strip():
            logger.warning("Membership webhook returned an empty body; member not found")
            return LookupNotFound()

        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except ValueError:
            logger.warning(
                "Failed to parse membership webhook response: %s", body[:_LOGGED_BODY_CHARS]
            )
            return LookupUpstreamMalformed()

        if not isinstance(payload, dict) or not isinstance(
            payload.get("membershipSummary"), dict
        ):
            logger.warning(
                "Membership webhook response has no membershipSummary (got %s)",
                type(payload).__name__,
            )
            return LookupUnrecognizedPayload()

        return LookupFound(payload=payload)

    def _validated_identifier(self, mobile: Any) -> str:
        if not isinstance(mobile, str) or not mobile.strip():
            raise LookupValidationError("empty identifier")
        return mobile.strip()
