from typing import Any, Callable, Dict, Optional, Sequence, Type, TypeVar, Union, TypedDict
from pydantic import BaseModel, ValidationError
from common.errors import AppError
from common.responses import (
    bad_request,
    internal_error,
    message,
    unprocessable_entity,
)
from loguru import logger
import functools
import json

T = TypeVar("T", bound=BaseModel)
JsonDict = Dict[str, Any]


class APIGatewayResponse(TypedDict):
    statusCode: int
    body: str
    headers: Dict[str, str]


Response = Union[APIGatewayResponse, Dict[str, Any]]


def _merge_request_data(event: JsonDict, query_params: Sequence[str]) -> Dict[str, Any]:
    qs = event.get("queryStringParameters") or {}
    path = event.get("pathParameters") or {}
    data = {k: v for k, v in path.items() if k not in query_params}
    data.update({k: qs[k] for k in query_params if k in qs})
    return data


def _log_event(event: JsonDict) -> None:
    try:
        logger.info("Event: {}", json.dumps(event, default=str))
    except (TypeError, ValueError):
        logger.info("Event: {!r}", event)


def lambda_wrapper(
    model: Type[T],
    invalid_message: Optional[str] = None,
    query_params: Sequence[str] = (),
) -> Callable[[Callable[[T, Any], Response]], Callable[..., Response]]:
    """
    Decorator that hydrates a Pydantic model from the API Gateway event.

    Args:
        model: The Pydantic class to validate path and query parameters against.
        invalid_message: When set, validation failures answer 400 with this
            message instead of 422 with the validation details.
        query_params: Query string keys the model may read. Every other field
            comes from the path parameters only.
    """

    def decorator(func: Callable[[T, Any], Response]) -> Callable[..., Response]:
        @functools.wraps(func)
        def wrapper(event: Optional[JsonDict], context: Any) -> Response:
            event = event or {}

            try:
                _log_event(event)
                request_data = _merge_request_data(event, query_params)

                try:
                    request_model = model(**request_data)
                except ValidationError as e:
                    logger.warning(f"Validation failed: {e.errors()}")
                    if invalid_message:
                        return bad_request(invalid_message)
                    return unprocessable_entity(error=e.json())

                return func(request_model, context)

            except AppError as e:
                logger.warning(f"{e.status_code}: {e.message}")
                return message(e.status_code, e.message)

            except Exception as e:
                logger.exception("Unhandled exception in lambda_wrapper")
                return internal_error(error=str(e))

        return wrapper

    return decorator
