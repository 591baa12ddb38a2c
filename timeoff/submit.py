import logging
from typing import Mapping, Optional

import httpx

from timeoff.fields import ErrorKind, SubmissionOutcome

logger = logging.getLogger(__name__)


def _multipart(fields: Mapping[str, Optional[str]]) -> dict:
    # (None, value) parts are sent without a filename, i.e. as plain form fields
    return {name: (None, (value or "").encode("utf-8")) for name, value in fields.items()}


async def post_form(
    endpoint: str,
    fields: Mapping[str, Optional[str]],
    timeout: float = 30,
    transport: httpx.AsyncBaseTransport = None,
) -> SubmissionOutcome:
    """POST ``fields`` as multipart/form-data and interpret the JSON reply.

    The backend answers ``{"success": bool, "message": str}``. Anything else,
    including transport errors and non-2xx statuses, becomes a failed outcome.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            r = await client.post(endpoint, files=_multipart(fields))
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Transport error posting to {endpoint}: {e!r}")
        return SubmissionOutcome.failed(ErrorKind.TRANSPORT, str(e) or type(e).__name__)

    if not r.is_success:
        logger.error(f"Backend responded HTTP {r.status_code}")
        return SubmissionOutcome.failed(
            ErrorKind.HTTP_STATUS, f"Request failed: {r.status_code}", status_code=r.status_code
        )

    try:
        result = r.json()
    except ValueError as e:
        logger.error(f"Backend reply is not JSON: {e}")
        return SubmissionOutcome.failed(
            ErrorKind.BAD_RESPONSE, "Invalid response from server", status_code=r.status_code
        )

    if isinstance(result, dict) and result.get("success"):
        logger.info(f"Server Response: success, msg={result.get('message')}")
        return SubmissionOutcome.succeeded(result.get("message"))

    message = result.get("message") if isinstance(result, dict) else None
    logger.warning(f"Server Response: rejected, msg={message}")
    return SubmissionOutcome.failed(
        ErrorKind.APPLICATION, str(message) if message else "Unknown error", status_code=r.status_code
    )
