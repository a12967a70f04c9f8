"""
Create action - insert a JSON document into a Cloudant database
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from models.cloudant import CreateResponse
from models.enums import ActionParam, HttpMethod
from services import cloudant_client
from utils.params import extract_params

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = (ActionParam.URL, ActionParam.DATABASE, ActionParam.BODY)


def main(args: Dict[str, Any]) -> Dict[str, Any]:
    """Invocation entry point"""
    params = extract_params(args, REQUIRED_PARAMS, "create")
    if params is None:
        return {"ok": False}

    return create(
        params[ActionParam.URL.value],
        params[ActionParam.DATABASE.value],
        params[ActionParam.BODY.value]
    )


def create(url: str, database: str, body: str, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """
    POST ``body`` to the database root and report the assigned id/revision

    Args:
        url: Cloudant base URL
        database: Database name
        body: Document as JSON text, forwarded verbatim
        client: Optional caller-owned HTTP client

    Returns:
        ``{"ok": True, "document": <envelope>}`` when the store accepted the
        document, ``{"ok": False}`` otherwise
    """
    endpoint = cloudant_client.document_url(url, database)

    with cloudant_client.session(client) as http:
        data = cloudant_client.send_request(http, HttpMethod.POST, endpoint, body=body)

    if data is None:
        return {"ok": False}

    try:
        envelope = CreateResponse.model_validate_json(data)
    except ValidationError:
        logger.error(f"Unexpected response from Cloudant: {data.decode('utf-8', errors='replace')}")
        return {"ok": False}

    if not envelope.ok:
        logger.warning(f"Cloudant refused to create a document in {database}")
        return {"ok": False}

    logger.info(f"Created document {envelope.id} in {database}")
    return {"ok": True, "document": envelope.model_dump()}
