"""
Cloudant document actions

Every action is an independent ``main(args) -> dict`` entry point. The
registry maps the names the hosting platform invokes them by to their
entry point and required parameters.
"""

from typing import Any, Callable, Dict, NamedTuple, Tuple

from models.enums import ActionParam
from actions import create, read, update, delete, delete_all

class ActionSpec(NamedTuple):
    main: Callable[[Dict[str, Any]], Dict[str, Any]]
    required: Tuple[ActionParam, ...]

ACTIONS: Dict[str, ActionSpec] = {
    "create": ActionSpec(create.main, create.REQUIRED_PARAMS),
    "read": ActionSpec(read.main, read.REQUIRED_PARAMS),
    "update": ActionSpec(update.main, update.REQUIRED_PARAMS),
    "delete": ActionSpec(delete.main, delete.REQUIRED_PARAMS),
    "deleteAll": ActionSpec(delete_all.main, delete_all.REQUIRED_PARAMS),
}
