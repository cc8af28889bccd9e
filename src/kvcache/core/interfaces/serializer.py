"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for encoding cached values.

    Serializers convert between Python objects and the bytes
    written to the store.
    """

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to a value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
