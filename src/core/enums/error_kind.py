"""Error kind tags.

Every error variant carries exactly one ErrorKind. The tag is data, not
behavior: callers inspect it to decide how to present a failure (for
example, which transport status to map to). The core never branches on it.

Kinds:
- ERROR: Base error (also used by the shared sentinels)
- PROBLEM: Generic business error with arbitrary code/description
- VALIDATION: Aggregate of per-field validation messages
- NOT_FOUND .. INTERNAL_SERVER_ERROR: Transport-flavoured failure kinds
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag identifying the variant of an Error."""

    ERROR = "error"
    PROBLEM = "problem"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"
    UNAUTHORISED = "unauthorised"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TOO_MANY_REQUESTS = "too_many_requests"
    GATEWAY_TIMEOUT = "gateway_timeout"
    RESOURCE_LOCKED = "resource_locked"
    RESOURCE_GONE = "resource_gone"
    INTERNAL_SERVER_ERROR = "internal_server_error"
