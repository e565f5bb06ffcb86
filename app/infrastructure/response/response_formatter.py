from typing import Any, Dict, Optional, Union, List


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    success: bool = True,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the standard response envelope

    Args:
        data: response payload, omitted from the envelope when None
        success: whether the request succeeded
        message: human readable message, omitted when None

    Returns:
        Dict[str, Any]: {"success": ..., "message": ..., "data": ...}
    """
    body: Dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def success_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """Successful response envelope."""
    return standard_response(data=data, success=True, message=message)


def error_response(message: str, error: Any = None) -> Dict[str, Any]:
    """
    Failed response envelope

    Args:
        message: error message
        error: optional error detail, added under the "error" key
    """
    body = standard_response(success=False, message=message)
    if error is not None:
        body["error"] = error
    return body


def not_found_response(message: str) -> Dict[str, Any]:
    return error_response(message=message)


def validation_error_response(issue: Optional[str]) -> Dict[str, Any]:
    """
    Validation failure envelope, reporting only the first issue

    Args:
        issue: message of the first validation issue
    """
    body = standard_response(success=False, message="Validation failed")
    body["errors"] = issue
    return body


def server_error_response(err: BaseException) -> Dict[str, Any]:
    """Catch-all 500 envelope."""
    return error_response(message="Something is wrong, please try again", error=str(err))
