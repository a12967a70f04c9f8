"""
Shared HTTP helper used by every Cloudant action

Each action opens one client per invocation, issues its requests strictly
in sequence and closes the client before returning. Failures never raise out
of this module: they are logged and reported as a missing response.
"""

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Union
from urllib.parse import urlsplit, urlunsplit

import httpx

from config.settings import CLOUDANT_TIMEOUT
from models.enums import HttpMethod

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def create_http_client() -> httpx.Client:
    """Build the client for a single invocation"""
    return httpx.Client(headers=JSON_HEADERS, timeout=CLOUDANT_TIMEOUT)


@contextmanager
def session(client: Optional[httpx.Client] = None) -> Iterator[httpx.Client]:
    """
    Yield ``client`` untouched, or a fresh client that is closed on exit

    Args:
        client: Optional caller-owned client, left open after use
    """
    if client is not None:
        yield client
        return

    with create_http_client() as owned:
        yield owned


def document_url(base_url: str, database: str, doc_id: Optional[str] = None) -> str:
    """Join ``{url}/{database}[/{id}]`` without any re-encoding"""
    url = f"{base_url}/{database}"
    if doc_id is not None:
        url = f"{url}/{doc_id}"
    return url


def mask_url(url: str) -> str:
    """Hide userinfo credentials before a URL reaches the log stream"""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return "<invalid url>"
    if parts.username is None and parts.password is None:
        return url
    host = parts.hostname or ""
    if port:
        host = f"{host}:{port}"
    return urlunsplit((parts.scheme, f"***@{host}", parts.path, parts.query, parts.fragment))


def send_request(
    client: httpx.Client,
    method: Union[HttpMethod, str],
    url: str,
    body: Optional[Union[str, bytes]] = None,
    params: Optional[Dict[str, str]] = None,
) -> Optional[bytes]:
    """
    Issue one blocking request against Cloudant

    Args:
        client: Client opened by :func:`session`
        method: HTTP verb
        url: Fully built endpoint
        body: Optional raw JSON payload, sent as-is
        params: Optional query parameters (e.g. ``rev``)

    Returns:
        The raw response body, or None on an encoding error, URL error,
        transport error or empty response
    """
    verb = method.value if isinstance(method, HttpMethod) else method.upper()
    logger.debug(f"{verb} {mask_url(url)}")

    try:
        if isinstance(body, str):
            body = body.encode("utf-8")
        response = client.request(verb, url, content=body, params=params)
    except UnicodeEncodeError as e:
        logger.error(f"Request for {mask_url(url)} holds text that cannot be encoded: {e}")
        return None
    except httpx.InvalidURL as e:
        logger.error(f"Failed to build a request for {mask_url(url)}: {e}")
        return None
    except httpx.HTTPError as e:
        logger.error(f"Invalid response from Cloudant for {verb} {mask_url(url)}: {e}")
        return None

    if response.status_code >= 400:
        logger.warning(f"Cloudant answered {verb} {mask_url(url)} with HTTP {response.status_code}")

    if not response.content:
        logger.error(f"Missing response from Cloudant for {verb} {mask_url(url)}")
        return None

    return response.content


def parse_json(data: Optional[bytes]) -> Optional[Dict[str, Any]]:
    """Decode a response body that must be a JSON object"""
    if data is None:
        return None
    try:
        decoded = json.loads(data)
    except (ValueError, UnicodeDecodeError) as e:
        logger.error(f"Failed to decode JSON from Cloudant: {e}")
        return None

    if not isinstance(decoded, dict):
        logger.error(f"Expected a JSON object from Cloudant, got {type(decoded).__name__}")
        return None
    return decoded


def get_document(client: httpx.Client, url: str) -> Optional[Dict[str, Any]]:
    """GET a document and decode it"""
    return parse_json(send_request(client, HttpMethod.GET, url))
