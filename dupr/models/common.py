"""
Common models and decoding helpers for DUPR API responses.
"""

import json
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import DecodingError


class DuprResource(BaseModel):
    """Base class for DUPR API resources.

    Fields declare the server's JSON key as an alias; unknown keys are ignored
    so new server fields never break decoding.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    @classmethod
    def from_api_data(cls, data: Any):
        """Create the resource from a decoded API record."""
        if not isinstance(data, dict):
            raise DecodingError(
                f"Expected an object for {cls.__name__}, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DecodingError(e) from e

    def to_api_data(self) -> dict[str, Any]:
        """Serialise back to the server's key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode_json(body: Union[bytes, str]) -> dict[str, Any]:
    """Decode a response body that must be a JSON object."""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodingError(e, _text(body)) from e

    if not isinstance(data, dict):
        raise DecodingError(f"Failed to decode JSON: {_text(body)}", _text(body))

    return data


def get_result(
    response: dict[str, Any], error_message: str = "Failed to get results from data."
) -> dict[str, Any]:
    """Extract the ``result`` object wrapping most DUPR responses."""
    result = response.get("result")
    if not isinstance(result, dict):
        raise DecodingError(error_message)
    return result


def _text(body: Union[bytes, str]) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body
