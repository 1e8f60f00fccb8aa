from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class MemberLookupRequest(BaseModel):
    mobile: str | None = Field(
        default=None,
        description="Member mobile number forwarded to the membership service.",
    )


class MembershipSummary(BaseModel):
    total: int
    used: int
    balance: int
    is_expired: bool = Field(alias="isExpired")


class Purchase(BaseModel):
    date: str
    item: str
    amount: float


class ActivityLog(BaseModel):
    date: str
    activity: str


class MemberHistory(BaseModel):
    purchases: list[Purchase] = Field(default_factory=list)
    activity_logs: list[ActivityLog] = Field(default_factory=list, alias="activityLogs")


class MemberLookupResponse(BaseModel):
    """Documented shape of a successful lookup.

    The gateway does not validate against this model; the upstream payload is
    returned as received once ``membershipSummary`` is present.
    """

    model_config = ConfigDict(populate_by_name=True)

    membership_summary: MembershipSummary = Field(alias="membershipSummary")
    history: MemberHistory


class LookupFound(BaseModel):
    outcome: Literal["found"] = "found"
    payload: dict[str, Any]


class LookupNotFound(BaseModel):
    outcome: Literal["not_found"] = "not_found"


class LookupUnrecognizedPayload(BaseModel):
    """Upstream answered with valid JSON that does not look like a member record."""

    outcome: Literal["unrecognized_payload"] = "unrecognized_payload"


class LookupUpstreamError(BaseModel):
    outcome: Literal["upstream_error"] = "upstream_error"
    status_code: int


class LookupUpstreamMalformed(BaseModel):
    outcome: Literal["upstream_malformed"] = "upstream_malformed"


class LookupTransportFailure(BaseModel):
    outcome: Literal["transport_failure"] = "transport_failure"
    reason: str


LookupResult = Union[
    LookupFound,
    LookupNotFound,
    LookupUnrecognizedPayload,
    LookupUpstreamError,
    LookupUpstreamMalformed,
    LookupTransportFailure,
]
