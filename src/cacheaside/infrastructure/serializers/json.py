"""JSON serializer implementation."""

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from cacheaside.core.exceptions import SerializationError

__all__ = ["JsonSerializer", "SerializationError"]


class JsonSerializer:
    """JSON serializer for cached responses.

    Handles serialization of response payloads to JSON bytes and back.
    Dates and datetimes are written as ISO strings, the way a JSON API
    would render them, so a cache hit returns what the client saw on
    the miss.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            json_str = json.dumps(
                value,
                default=self._default_encoder,
                separators=(",", ":"),
                allow_nan=False,
            )
            return json_str.encode(self._encoding)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            json_str = data.decode(self._encoding)
            return json.loads(json_str)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for non-JSON-serializable types.

        Raises:
            TypeError: If the object cannot be encoded.
        """
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Decimal):
            return float(obj)
        if hasattr(obj, "model_dump"):
            return obj.model_dump(mode="json")
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
