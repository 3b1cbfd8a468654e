from typing import Any, Optional, Dict
import json

_DEFAULT_HEADERS = {
    "content-type": "application/json",
}


def api_response(
    status_code: int,
    body: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    Centralized API Gateway response formatter.

    Args:
        status_code: HTTP status code
        body: Response body dict
        headers: Custom headers to include

    Returns:
        Formatted Lambda response for API Gateway
    """
    final_headers = (
        dict(_DEFAULT_HEADERS) if headers is None else {**_DEFAULT_HEADERS, **headers}
    )

    return {
        "statusCode": status_code,
        "headers": final_headers,
        "body": json.dumps(body) if body is not None else "",
    }


def success(data: Any, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Success response (200) wrapping the payload under "data"."""
    return api_response(200, body={"data": data}, headers=headers)


def message(
    status_code: int, text: str, headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """Response carrying a human readable {"message": ...} body."""
    return api_response(status_code, body={"message": text}, headers=headers)


def bad_request(text: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Bad request response (400)."""
    return message(400, text, headers=headers)


def unprocessable_entity(
    error: str, headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """Unprocessable entity response (422)."""
    return api_response(422, body={"error": error}, headers=headers)


def internal_error(
    error: str = "Internal server error", headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """Internal server error response (500)."""
    return api_response(500, body={"error": error}, headers=headers)
