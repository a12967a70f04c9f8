"""
Configuration settings for the Cloudant document actions
"""

import os
import logging

from models.enums import ActionParam

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


def _optional_float(name: str):
    """Read an optional float from the environment, empty means unset"""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")


# Default parameter bindings applied by the local runner, never by the actions
CLOUDANT_URL = os.getenv("CLOUDANT_URL")
CLOUDANT_DATABASE = os.getenv("CLOUDANT_DATABASE")

# None keeps the HTTP wait unbounded
CLOUDANT_TIMEOUT = _optional_float("CLOUDANT_TIMEOUT")

PORT = int(os.getenv("PORT", 8080))

if CLOUDANT_TIMEOUT is None:
    logger.info("CLOUDANT_TIMEOUT not set - requests to Cloudant will wait indefinitely")
else:
    logger.info(f"Cloudant request timeout: {CLOUDANT_TIMEOUT}s")


def default_bindings():
    """Parameter defaults merged under the caller's parameters by the runner"""
    bindings = {}
    if CLOUDANT_URL:
        bindings[ActionParam.URL.value] = CLOUDANT_URL
    if CLOUDANT_DATABASE:
        bindings[ActionParam.DATABASE.value] = CLOUDANT_DATABASE
    return bindings
