from __future__ import annotations

from collections.abc import Callable


class ExternalAPIError(RuntimeError):
    def __init__(self, service: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class FetchError(ExternalAPIError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("menu_api", message, status_code=status_code)


class MenuNotFoundError(LookupError):
    pass


class ItemNotFoundError(LookupError):
    pass


class InvariantError(ValueError):
    pass


def invariant(condition: object, message: str | Callable[[], str]) -> None:
    """Raise InvariantError with ``message`` when ``condition`` is falsy.

    ``message`` may be a callable so that expensive messages are only built
    on failure.
    """
    if not condition:
        raise InvariantError(message() if callable(message) else message)
