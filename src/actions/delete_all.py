"""
DeleteAll action - drop a database and recreate it empty

Destructive: there is no confirmation and no rollback. When the recreate
step fails the database stays deleted.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from models.cloudant import OkResponse
from models.enums import ActionParam, HttpMethod
from services import cloudant_client
from utils.params import extract_params

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = (ActionParam.URL, ActionParam.DATABASE)


def main(args: Dict[str, Any]) -> Dict[str, Any]:
    """Invocation entry point"""
    params = extract_params(args, REQUIRED_PARAMS, "deleteAll")
    if params is None:
        return {"ok": False}

    return delete_all(params[ActionParam.URL.value], params[ActionParam.DATABASE.value])


def _decode_ok(data: Optional[bytes]) -> Optional[bool]:
    if data is None:
        return None
    try:
        return OkResponse.model_validate_json(data).ok
    except ValidationError:
        logger.error("Could not decode JSON response from Cloudant")
        return None


def delete_all(url: str, database: str, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """DELETE ``{url}/{database}`` then PUT it back"""
    endpoint = cloudant_client.document_url(url, database)

    with cloudant_client.session(client) as http:
        deleted = _decode_ok(cloudant_client.send_request(http, HttpMethod.DELETE, endpoint))
        if deleted is not True:
            logger.error(f"Could not delete database - {database}")
            return {"ok": False}

        logger.warning(f"Deleted database {database}, recreating it")
        created = _decode_ok(cloudant_client.send_request(http, HttpMethod.PUT, endpoint))

    if created is None:
        logger.error(f"Could not recreate database - {database}")
        return {"ok": False}

    if not created:
        logger.error(f"Cloudant refused to recreate database - {database}")
    return {"ok": created}
