import httpx

from venue_dashboard.middleware.correlation import propagation_headers


class MembershipTransportError(Exception):
    """The membership webhook could not be reached or did not answer in time."""


class MembershipClient:
    def __init__(self, webhook_url: str, timeout_seconds: float):
        self._webhook_url = webhook_url
        self._timeout = timeout_seconds

    async def lookup(self, mobile: str, correlation_id: str) -> tuple[int, str]:
        """POST the identifier once and return the upstream status and raw body text."""
        headers = propagation_headers(correlation_id)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._webhook_url, json={"mobile": mobile}, headers=headers
                )
                return response.status_code, response.text
        except httpx.HTTPError as exc:
            raise MembershipTransportError(
                f"membership webhook communication failure: {exc.__class__.__name__}"
            ) from exc
