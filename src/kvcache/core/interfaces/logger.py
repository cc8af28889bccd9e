"""Logger interface."""

from typing import Any, Protocol


class ILogger(Protocol):
    """Logging capability injected into the cache client.

    A ``logging.Logger`` satisfies this protocol, as does any object
    with the same four methods. Loggers that name the warning method
    ``warn`` instead are also accepted by the cache client.
    """

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
