"""Client for the public translation endpoint."""
from __future__ import annotations
import json
import logging
from typing import Any

import httpx

from translation_relay.common.config import Settings
from translation_relay.common.errors import UpstreamShapeError, UpstreamStatusError
from translation_relay.common.schema import Direction

LOGGER = logging.getLogger("translation_relay.upstream")

BODY_EXCERPT = 200

def build_params(text: str, direction: Direction, client_id: str = "gtx") -> dict[str, str]:
    return {
        "client": client_id,
        "sl": direction.from_lang,
        "tl": direction.to_lang,
        "dt": "t",
        "q": text,
    }

def _decode_body(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return r.text

def _excerpt(data: Any) -> str:
    if isinstance(data, str):
        return data[:BODY_EXCERPT]
    return json.dumps(data, ensure_ascii=False)[:BODY_EXCERPT]

def parse_upstream(data: Any) -> str:
    """
    Extract translated text from the upstream reply.

    Args:
        data: Decoded body. Either a list whose first element is a list of
            [translated_chunk, original, ...] tuples, or a bare string.

    Returns:
        Chunks concatenated in order, or the string verbatim.

    Raises:
        UpstreamShapeError: for any other shape.
    """
    if isinstance(data, list) and data and isinstance(data[0], list):
        parts = []
        for item in data[0]:
            if isinstance(item, list) and item and isinstance(item[0], str):
                parts.append(item[0])
        return "".join(parts)
    if isinstance(data, str):
        return data
    raise UpstreamShapeError()

def fetch_translation(text: str, direction: Direction, settings: Settings) -> str:
    """
    Translate text with a single GET to the upstream endpoint.

    Raises:
        UpstreamStatusError: upstream answered with status >= 400.
        UpstreamShapeError: body could not be parsed.
        httpx.HTTPError: transport failures, left to the caller.
    """
    params = build_params(text, direction, settings.upstream_client)
    headers = {"User-Agent": settings.upstream_user_agent}
    LOGGER.info(
        "Upstream request: sl=%s tl=%s url=%s",
        direction.from_lang,
        direction.to_lang,
        settings.upstream_url,
    )

    with httpx.Client(timeout=settings.upstream_timeout, follow_redirects=True) as client:
        r = client.get(settings.upstream_url, params=params, headers=headers)

    LOGGER.info("Upstream status: %s", r.status_code)
    if r.status_code >= 400:
        raise UpstreamStatusError(r.status_code)

    data = _decode_body(r)
    LOGGER.debug("Upstream body (truncated): %s", _excerpt(data))
    return parse_upstream(data)
