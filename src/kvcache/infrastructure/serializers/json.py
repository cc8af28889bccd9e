"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any

from kvcache.core.exceptions import SerializationError

_DATETIME_TAG = "__datetime__"
_DATE_TAG = "__date__"


class JsonSerializer:
    """JSON serializer for cache values.

    Encodes JSON-compatible values to bytes. ``datetime`` and ``date``
    values are written as tagged objects and restored on read; other
    objects with a ``__dict__`` are written as that dict.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value as bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            return json.dumps(value, default=self._encode_object).encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes | str) -> Any:
        """Deserialize bytes to value.

        Args:
            data: The bytes to deserialize. ``str`` is accepted for
                clients configured with ``decode_responses``.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            text = data if isinstance(data, str) else data.decode(self._encoding)
            return json.loads(text, object_hook=self._decode_object)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _encode_object(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return {_DATETIME_TAG: obj.isoformat()}
        if isinstance(obj, date):
            return {_DATE_TAG: obj.isoformat()}
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    def _decode_object(self, obj: dict[str, Any]) -> Any:
        if len(obj) == 1:
            if _DATETIME_TAG in obj:
                return datetime.fromisoformat(obj[_DATETIME_TAG])
            if _DATE_TAG in obj:
                return date.fromisoformat(obj[_DATE_TAG])
        return obj
