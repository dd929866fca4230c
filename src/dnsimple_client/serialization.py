"""Conversion between JSON values and the client's dataclass models.

Models are plain standard-library dataclasses; pydantic validates JSON into them
(nested dataclasses, lists and optionals included) and dumps payloads back out.
"""

import dataclasses
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter

from dnsimple_client.errors.exceptions import DeserializationError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(output_type: Any) -> TypeAdapter:
    return TypeAdapter(output_type)


def parse_as(output_type: type[T] | Any, value: Any) -> T:
    """Validate a decoded JSON value into `output_type`.

    Args:
        output_type: Any type pydantic understands (`Zone`, `list[Zone]`, `list[str]`, ...)
        value: The decoded JSON value

    Returns:
        The value converted to `output_type`

    Raises:
        DeserializationError: If the value does not match the expected shape
    """
    try:
        return _adapter(output_type).validate_python(value)
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        raise DeserializationError(str(e)) from e


def to_json_payload(payload: Any) -> Any:
    """Turn a request payload into a JSON compatible value.

    Dataclass payloads drop the fields that are None, so optional attributes the
    caller did not set are not sent at all.

    Raises:
        DeserializationError: If the payload cannot be represented as JSON
    """
    try:
        if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
            return _adapter(type(payload)).dump_python(payload, mode="json", exclude_none=True)
        return _adapter(Any).dump_python(payload, mode="json")
    except (ValueError, TypeError) as e:
        raise DeserializationError(f"Cannot serialize json payload: {e}") from e
