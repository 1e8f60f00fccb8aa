from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from venue_dashboard.middleware.correlation import correlation_id_var


class ProblemDetails(BaseModel):
    type: str = "about:blank"
    title: str
    status: int
    detail: str
    instance: str
    correlation_id: str
    error_code: str


def problem_response(
    request: Request,
    *,
    status_code: int,
    title: str,
    detail: str,
    error_code: str,
) -> JSONResponse:
    problem = ProblemDetails(
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        correlation_id=correlation_id_var.get() or "",
        error_code=error_code,
    )
    return JSONResponse(
        status_code=status_code,
        media_type="application/problem+json",
        content=problem.model_dump(),
    )
