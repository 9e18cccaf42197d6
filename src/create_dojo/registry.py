"""Latest-version lookup against the npm registry."""

from __future__ import annotations

import logging

import httpx

from create_dojo.errors import NetworkError

logger = logging.getLogger(__name__)


def get_latest_version(
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> str:
    """
    Return the ``latest`` dist-tag served at *url*.

    A single blocking GET. Any transport failure, non-200 status, malformed body
    or missing tag raises ``NetworkError``.
    """
    own_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout)

    try:
        logger.debug("GET %s", url)
        response = client.get(url)
    except httpx.HTTPError as e:
        raise NetworkError(f"Failed to fetch latest version: {e}") from e
    finally:
        if own_client:
            client.close()

    if response.status_code != 200:
        raise NetworkError(f"Failed to fetch latest version: {response.status_code}")

    try:
        payload = response.json()
    except ValueError as e:
        raise NetworkError(f"Registry returned malformed JSON from {url}") from e

    latest = payload.get("latest") if isinstance(payload, dict) else None
    if not isinstance(latest, str) or not latest:
        raise NetworkError(f"Registry response from {url} has no 'latest' tag")

    logger.debug("Latest version is %s", latest)
    return latest
