"""
Update action - read-merge-write of an existing document

The caller's body is a JSON object holding the document ``id`` plus the
fields to change. The stored document is fetched, the fields are merged over
it (caller wins) and the result is PUT back with the stored ``_rev``. There
is no compare-and-swap: a revision that changes between the GET and the PUT
is rejected by Cloudant and reported here as a plain failure.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from models.enums import ActionParam, HttpMethod
from services import cloudant_client
from utils.params import extract_params

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = (ActionParam.URL, ActionParam.DATABASE, ActionParam.BODY)


def main(args: Dict[str, Any]) -> Dict[str, Any]:
    """Invocation entry point"""
    params = extract_params(args, REQUIRED_PARAMS, "update")
    if params is None:
        return {"ok": False}

    try:
        patch = json.loads(params[ActionParam.BODY.value])
    except ValueError as e:
        logger.error(f"Unable to parse body as JSON: {e}")
        return {"ok": False}

    if not isinstance(patch, dict):
        logger.error("Body must be a JSON object")
        return {"ok": False}

    error = patch.get("error")
    if isinstance(error, str):
        logger.error(f"Body carries an error: {error}")
        return {"ok": False, "error": error}

    doc_id = patch.pop("id", None)
    if not isinstance(doc_id, str):
        logger.error("No id provided in the JSON body")
        return {"ok": False}

    endpoint = cloudant_client.document_url(
        params[ActionParam.URL.value],
        params[ActionParam.DATABASE.value],
        doc_id
    )
    return update(endpoint, patch)


def merge_document(original: Dict[str, Any], patch: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge, keys in ``patch`` overwrite those in ``original``"""
    merged = dict(original)
    merged.update(patch)
    return merged


def update(url: str, patch: Dict[str, Any], client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """
    Merge ``patch`` into the document stored at ``url``

    Args:
        url: Document endpoint ``{url}/{database}/{id}``
        patch: Fields to overwrite, without ``id``
        client: Optional caller-owned HTTP client

    Returns:
        ``{"ok": True, "document": <merged document as JSON text>}`` or
        ``{"ok": False}``
    """
    with cloudant_client.session(client) as http:
        original = cloudant_client.get_document(http, url)
        if original is None or isinstance(original.get("error"), str):
            logger.error("Cloudant document does not exist")
            return {"ok": False}

        merged = merge_document(original, patch)
        payload = json.dumps(merged, separators=(",", ":"))

        result = cloudant_client.parse_json(
            cloudant_client.send_request(http, HttpMethod.PUT, url, body=payload)
        )

    if result is None:
        logger.error("Invalid or missing response from Cloudant")
        return {"ok": False}

    if "error" in result:
        logger.error(f"Cloudant rejected the update: {result['error']} ({result.get('reason', 'no reason given')})")
        return {"ok": False}

    return {"ok": True, "document": payload}
