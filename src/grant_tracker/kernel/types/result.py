"""Download outcome – ``Ok(document)`` or ``Err(error)`` as returned by ``download_csv``.

The UI handler that triggered a download branches on the outcome instead of
catching exceptions::

    match await download_csv():
        case Ok(document):
            offer(document.filename, document.location)
        case Err(error):
            show_banner(error.to_dict())
"""

from __future__ import annotations

from typing import Any, Generic, NoReturn, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


def _payload(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    return to_dict() if callable(to_dict) else obj


class Ok(Generic[T]):
    """The dataset was fetched, decoded and saved."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "value": _payload(self._value)}

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """The download failed; ``error`` is the original error object, unchanged."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._error

    def unwrap_or(self, default: T) -> T:
        return default

    def to_dict(self) -> dict[str, Any]:
        """Foreign exceptions (not ``BaseError``) are reported by type and text only."""
        error = self._error
        if callable(getattr(error, "to_dict", None)):
            return {"ok": False, "error": error.to_dict()}  # type: ignore[attr-defined]
        return {"ok": False, "error": {"code": type(error).__name__, "message": str(error)}}

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]

__all__ = ["Err", "Ok", "Result"]
