from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from venue_dashboard.clients.membership_client import MembershipClient
from venue_dashboard.config import settings
from venue_dashboard.contracts.errors import ProblemDetails, problem_response
from venue_dashboard.contracts.members import (
    LookupFound,
    LookupNotFound,
    LookupResult,
    LookupTransportFailure,
    LookupUnrecognizedPayload,
    LookupUpstreamError,
    LookupUpstreamMalformed,
    MemberLookupRequest,
    MemberLookupResponse,
)
from venue_dashboard.middleware.correlation import correlation_id_var
from venue_dashboard.services.member_lookup_service import (
    LookupValidationError,
    MemberLookupService,
)

router = APIRouter(prefix="/api/members", tags=["members"])


def _member_lookup_service() -> MemberLookupService:
    return MemberLookupService(
        membership_client=MembershipClient(
            webhook_url=settings.membership_webhook_url,
            timeout_seconds=settings.membership_timeout_seconds,
        ),
    )


@router.post(
    "/lookup",
    summary="Look Up Member by Mobile Number",
    description=(
        "Forwards the trimmed mobile number to the external membership webhook and "
        "returns its membership summary and history as received."
    ),
    responses={
        200: {"model": MemberLookupResponse},
        400: {"model": ProblemDetails, "description": "Empty identifier"},
        404: {"model": ProblemDetails, "description": "No member found"},
        500: {"model": ProblemDetails, "description": "Membership service unreachable"},
        502: {"model": ProblemDetails, "description": "Membership service error or invalid response"},
    },
)
async def lookup_member(request: Request, body: MemberLookupRequest) -> JSONResponse:
    service = _member_lookup_service()
    correlation_id = correlation_id_var.get()
    try:
        result = await service.lookup(mobile=body.mobile, correlation_id=correlation_id)
    except LookupValidationError:
        return problem_response(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            title="Bad Request",
            detail="Please enter a valid mobile number",
            error_code="INVALID_IDENTIFIER",
        )
    return _to_response(request, result)


def _to_response(request: Request, result: LookupResult) -> JSONResponse:
    if isinstance(result, LookupFound):
        return JSONResponse(status_code=status.HTTP_200_OK, content=result.payload)
    if isinstance(result, LookupNotFound):
        return problem_response(
            request,
            status_code=status.HTTP_404_NOT_FOUND,
            title="Not Found",
            detail="No member found with that mobile number. Please check and try again.",
            error_code="MEMBER_NOT_FOUND",
        )
    if isinstance(result, LookupUnrecognizedPayload):
        return problem_response(
            request,
            status_code=status.HTTP_404_NOT_FOUND,
            title="Not Found",
            detail="No member found with that mobile number.",
            error_code="MEMBER_PAYLOAD_UNRECOGNIZED",
        )
    if isinstance(result, LookupUpstreamError):
        return problem_response(
            request,
            status_code=status.HTTP_502_BAD_GATEWAY,
            title="Bad Gateway",
            detail=(
                f"The membership service returned an error ({result.status_code}). "
                "Please try again later or contact support."
            ),
            error_code="MEMBERSHIP_UPSTREAM_ERROR",
        )
    if isinstance(result, LookupUpstreamMalformed):
        return problem_response(
            request,
            status_code=status.HTTP_502_BAD_GATEWAY,
            title="Bad Gateway",
            detail="The membership service returned an invalid response. Please try again later.",
            error_code="MEMBERSHIP_UPSTREAM_MALFORMED",
        )
    if isinstance(result, LookupTransportFailure):
        return problem_response(
            request,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            title="Internal Server Error",
            detail=(
                "Unable to connect to the membership service. "
                "Please check your connection and try again."
            ),
            error_code="MEMBERSHIP_UNREACHABLE",
        )
    raise TypeError(f"Unhandled lookup outcome: {result!r}")
