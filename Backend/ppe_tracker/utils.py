from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from typing import Any, List, Optional

# INT column range
MAX_ID = 2**31 - 1


def success_resp(message: str, data: Any = None, status_code: int = 200):
    """
    Standardized Success Response
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({
            "success": True,
            "message": message,
            "data": data if data is not None else {}
        })
    )


def error_resp(message: str, status_code: int = 500, data: Any = None):
    """
    Standardized Error Response
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({
            "success": False,
            "message": message,
            "data": data if data is not None else {}
        })
    )


def list_resp(items: List[Any], empty_message: str):
    """
    Bare JSON array when there are rows; a message object when there are none.
    Clients must treat both shapes as "the list".
    """
    if not items:
        return success_resp(empty_message, [])
    return JSONResponse(status_code=200, content=jsonable_encoder(items))


def parse_id(raw: Any) -> Optional[int]:
    """Positive integer id from a path segment, or None when it is malformed."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if 0 < value <= MAX_ID else None
