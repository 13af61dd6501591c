# story_social/api/responses.py
"""
Response envelope shared by every handler:

    {"status": "success" | "failure", "message": str, "data": ...}

Failures also carry an `error_code` and, for validation errors, `details`.
"""

from typing import Any, Optional

from flask import jsonify

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

_NO_DATA = object()

def success(message: str, data: Any = _NO_DATA, status: int = 200):
    body = {"status": "success", "message": message}
    if data is not _NO_DATA:
        body["data"] = data
    return jsonify(body), status

def failure(error_code: str, message: str, status: int, details: Optional[Any] = None):
    body = {"status": "failure", "error_code": error_code, "message": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status

def internal_error():
    return failure(INTERNAL_SERVER_ERROR, "Internal Server Error", 500)
