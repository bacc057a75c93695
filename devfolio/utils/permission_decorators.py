import functools
import inspect
from http import HTTPStatus
from starlette.requests import Request
from devfolio.common.fast_api_response_wrapper import api_response
from enum import Enum


class ApiParamName(str, Enum):
    REQUEST = "request"
    CURRENT_USER = "current_user"
    OWNER_ID = "owner_id"


def authenticate():
    """
    Require an authenticated owner for a FastAPI endpoint.

    The decorator rewrites the endpoint signature so FastAPI injects the
    `Request`, rejects anonymous callers with 401, and then injects the
    session-derived parameters the endpoint declares:

    - `request`      -> Starlette/FastAPI Request object
    - `current_user` -> `UserContextDto` from `request.state.user`
    - `owner_id`     -> the session owner id

    Because `owner_id` always comes from the session, endpoints that write
    can never be pointed at another owner's rows by the caller.

    Example:
        class MyController:
            def __init__(self):
                self.router = APIRouter()
                self.router.add_api_route(
                    "/dashboard",
                    endpoint=authenticate()(self.get_dashboard),
                    methods=["GET"],
                )

            async def get_dashboard(self, owner_id: str):
                ...
    """

    def decorator(func):
        sig = inspect.signature(func)
        original_params = sig.parameters
        injected = {param.value for param in ApiParamName}

        api_params = [p for name, p in original_params.items() if name not in injected]

        # FastAPI needs `request` in the signature to inject the Request object.
        api_params.insert(
            0,
            inspect.Parameter(
                "request", inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=Request
            ),
        )

        @functools.wraps(func)
        async def wrapper(request: Request, *args, **kwargs):
            user = getattr(request.state, "user", None)
            if not user:
                return api_response(
                    success=False,
                    message="Unauthorized: sign in to continue",
                    status_code=HTTPStatus.UNAUTHORIZED,
                )

            business_kwargs = {
                k: v for k, v in kwargs.items() if k != ApiParamName.REQUEST.value
            }

            if ApiParamName.REQUEST.value in original_params:
                business_kwargs[ApiParamName.REQUEST.value] = request

            if ApiParamName.CURRENT_USER.value in original_params:
                business_kwargs[ApiParamName.CURRENT_USER.value] = user

            if ApiParamName.OWNER_ID.value in original_params:
                business_kwargs[ApiParamName.OWNER_ID.value] = user.owner_id

            return await func(*args, **business_kwargs)

        wrapper.__signature__ = sig.replace(parameters=api_params)
        return wrapper

    return decorator
