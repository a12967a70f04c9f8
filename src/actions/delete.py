"""
Delete action - remove a document at its current revision
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from models.cloudant import OkResponse, RevisionResponse
from models.enums import ActionParam, HttpMethod
from services import cloudant_client
from utils.params import extract_params

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = (ActionParam.URL, ActionParam.DATABASE, ActionParam.ID)

NOT_FOUND = {"ok": False, "error": "not found"}


def main(args: Dict[str, Any]) -> Dict[str, Any]:
    """Invocation entry point"""
    params = extract_params(args, REQUIRED_PARAMS, "delete")
    if params is None:
        return {"ok": False}

    return delete(
        params[ActionParam.URL.value],
        params[ActionParam.DATABASE.value],
        params[ActionParam.ID.value]
    )


def delete(url: str, database: str, doc_id: str, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """
    Look up the document revision, then DELETE ``{url}/{database}/{doc_id}?rev=``

    A document whose revision cannot be read is reported as not found and no
    DELETE is sent.
    """
    endpoint = cloudant_client.document_url(url, database, doc_id)

    with cloudant_client.session(client) as http:
        data = cloudant_client.send_request(http, HttpMethod.GET, endpoint)
        if data is None:
            logger.error(f"Entry {doc_id} does not exist in {database}")
            return dict(NOT_FOUND)

        try:
            revision = RevisionResponse.model_validate_json(data)
        except ValidationError:
            logger.error(f"Entry {doc_id} does not exist in {database}")
            return dict(NOT_FOUND)

        data = cloudant_client.send_request(
            http, HttpMethod.DELETE, endpoint, params={"rev": revision.rev}
        )

    if data is None:
        logger.error("Missing or invalid response from Cloudant")
        return {"ok": False}

    try:
        result = OkResponse.model_validate_json(data)
    except ValidationError:
        logger.error("Could not decode JSON response from Cloudant")
        return {"ok": False}

    if result.ok:
        logger.info(f"Deleted {doc_id} at revision {revision.rev} from {database}")
    return {"ok": result.ok}
