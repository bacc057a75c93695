from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from http import HTTPStatus


def api_response(
    message: str,
    success: bool = True,
    data: dict | None = None,
    status_code: HTTPStatus = HTTPStatus.OK,
) -> JSONResponse:
    """
    Build the JSON envelope shared by every portfolio endpoint.

    The body always has the shape `{"success", "message", "data"}`. Pydantic
    DTOs inside `data` are serialized through `jsonable_encoder`, which honours
    their camelCase aliases.

    Args:
        message (str): Human-readable outcome of the call.
        success (bool): Whether the call succeeded.
        data (dict | None): Optional payload.
        status_code (HTTPStatus): HTTP status, 200 by default.

    Returns:
        JSONResponse: The serialized envelope.

    Example:
        return api_response(
            message="Portfolio retrieved successfully",
            data={"portfolio": page},
        )
    """
    response_body = {
        "success": success,
        "message": message,
        "data": data,
    }

    return JSONResponse(
        status_code=status_code.value,
        content=jsonable_encoder(response_body, by_alias=True),
    )
