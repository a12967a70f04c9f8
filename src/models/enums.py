"""
Enum definitions for the Cloudant document actions
"""

from enum import Enum

class ActionParam(str, Enum):
    """Invocation parameter names shared by every action"""
    URL = "services.cloudant.url"
    DATABASE = "services.cloudant.database"
    ID = "id"
    BODY = "body"

class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
