from __future__ import annotations

from typing import Any, Iterable, Protocol


class StateStorage(Protocol):
    """Flat key-value store of JSON-serializable values.

    Writes are fire-and-forget: there is no transaction spanning several keys.
    """

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> Iterable[str]:
        raise NotImplementedError
