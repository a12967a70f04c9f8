"""
Invocation parameter helpers
"""

import logging
from typing import Any, Dict, Optional, Sequence, Union

from models.enums import ActionParam

logger = logging.getLogger(__name__)

def extract_params(
    args: Optional[Dict[str, Any]],
    required: Sequence[Union[ActionParam, str]],
    action: str
) -> Optional[Dict[str, str]]:
    """
    Pull the required string parameters out of an invocation mapping

    Args:
        args: Raw invocation parameters
        required: Names that must be present with a string value
        action: Action name used in the log message

    Returns:
        Mapping of parameter name to value, or None when any is missing
    """
    args = args or {}
    values = {}
    missing = []

    for param in required:
        name = param.value if isinstance(param, ActionParam) else param
        value = args.get(name)
        if isinstance(value, str):
            values[name] = value
        else:
            missing.append(name)

    if missing:
        logger.error(f"Missing a required parameter for {action}: {', '.join(missing)}")
        return None

    return values
