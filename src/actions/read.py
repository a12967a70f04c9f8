"""
Read action - fetch a single document by id
"""

import logging
from typing import Any, Dict, Optional

import httpx

from models.enums import ActionParam
from services import cloudant_client
from utils.params import extract_params

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = (ActionParam.URL, ActionParam.DATABASE, ActionParam.ID)


def main(args: Dict[str, Any]) -> Dict[str, Any]:
    """Invocation entry point"""
    params = extract_params(args, REQUIRED_PARAMS, "read")
    if params is None:
        return {"ok": False}

    return read(
        params[ActionParam.URL.value],
        params[ActionParam.DATABASE.value],
        params[ActionParam.ID.value]
    )


def read(url: str, database: str, doc_id: str, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """
    GET ``{url}/{database}/{doc_id}``

    The success result only carries ``document``; callers treat its
    presence as success. Store errors are forwarded as ``error``.
    """
    endpoint = cloudant_client.document_url(url, database, doc_id)

    with cloudant_client.session(client) as http:
        document = cloudant_client.get_document(http, endpoint)

    if document is None:
        return {"ok": False}

    error = document.get("error")
    if isinstance(error, str):
        logger.warning(f"Cloudant could not read {doc_id} from {database}: {error}")
        return {"ok": False, "error": error}

    return {"document": document}
