import os, logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger("lead_forwarder")

LEAD_ENDPOINT_URL = os.getenv("LEAD_ENDPOINT_URL")
LEAD_FORWARD_TIMEOUT = float(os.getenv("LEAD_FORWARD_TIMEOUT", "15"))
LEAD_FORWARD_DISABLE = os.getenv("LEAD_FORWARD_DISABLE", "0") == "1"  # log instead of sending (dev)
LEAD_FORWARD_STRICT = os.getenv("LEAD_FORWARD_STRICT", "0") == "1"    # callers must treat failures as errors
APP_NAME = os.getenv("APP_NAME", "VisaPath")


def forwarder_diagnostics() -> dict:
    return {
        "endpoint_present": bool(LEAD_ENDPOINT_URL),
        "timeout": LEAD_FORWARD_TIMEOUT,
        "disabled": LEAD_FORWARD_DISABLE,
        "strict": LEAD_FORWARD_STRICT,
    }


async def forward_submission(
    kind: str,
    payload: Dict[str, Any],
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bool:
    """
    POST a form submission as JSON to the external lead endpoint.
    Returns True if the endpoint accepted it (or forwarding is disabled).
    Never raises; failures are logged and reported as False.
    """
    if LEAD_FORWARD_DISABLE:
        logger.warning("[LEAD_FORWARD_DISABLED] %s submission from %s", kind, payload.get("email"))
        return True

    if not LEAD_ENDPOINT_URL:
        logger.warning("[LEAD_FORWARD_FALLBACK] LEAD_ENDPOINT_URL not set; dropping %s submission", kind)
        return False

    body = {"type": kind, "source": APP_NAME, "data": payload}
    headers = {"Content-Type": "application/json", "User-Agent": f"{APP_NAME}/1.0"}

    try:
        async with httpx.AsyncClient(timeout=LEAD_FORWARD_TIMEOUT, transport=transport) as client:
            resp = await client.post(LEAD_ENDPOINT_URL, json=body, headers=headers)
    except httpx.HTTPError as e:
        logger.error("Failed forwarding %s submission to %s: %s", kind, LEAD_ENDPOINT_URL, e)
        return False

    if resp.status_code >= 400:
        logger.error("Lead endpoint rejected %s submission: %s - %s", kind, resp.status_code, resp.text)
        return False

    logger.info("Forwarded %s submission (status %s)", kind, resp.status_code)
    return True
