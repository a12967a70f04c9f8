"""
Action invocation API routes
Stands in for the hosting platform: parameters in, result mapping out.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException
from fastapi.concurrency import run_in_threadpool

from actions import ACTIONS
from config.settings import default_bindings
from utils.error_handling import ErrorHandlingConfig

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("")
async def list_actions():
    """List the invocable actions and their required parameters"""
    return {
        name: [param.value for param in spec.required]
        for name, spec in ACTIONS.items()
    }

@router.post("/{name}")
async def invoke_action(name: str, params: Dict[str, Any] = Body(default={})):
    """
    Invoke action ``name`` with ``params``

    Configured default bindings are merged under the caller's parameters.
    The result mapping is returned as-is with HTTP 200, including failures.
    """
    spec = ACTIONS.get(name)
    if spec is None:
        raise HTTPException(status_code=404, detail=f"Unknown action: {name}")

    invocation = {**default_bindings(), **params}
    logger.info(f"Invoking action {name}")
    logger.debug(f"Parameters for {name}: {ErrorHandlingConfig.sanitize_data(invocation)}")

    # Actions block on Cloudant, keep them off the event loop
    return await run_in_threadpool(spec.main, invocation)
