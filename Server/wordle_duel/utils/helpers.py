"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional

from ..errors import InvalidRequestError


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None,  # Players are anonymous
        'username': None
    }


def get_json_body(request_obj) -> Dict[str, Any]:
    """Request JSON body, or an empty dict when absent or not an object."""
    data = request_obj.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_text(data: Dict[str, Any], key: str, label: str, max_length: Optional[int] = None) -> str:
    """
    Trimmed, non-empty string field from a request body.

    Raises:
        InvalidRequestError: if the field is missing, blank or longer than max_length
    """
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequestError(f'{label} is required')

    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise InvalidRequestError(f'{label} must be {max_length} characters or less')
    return value
