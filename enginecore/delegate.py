"""Multicast callbacks with handles and owners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List

_HANDLE_MASK = 0xFFFFFFFF


@dataclass
class _Entry:
    handle: int
    func: Callable[..., Any]
    owner: Any


class Delegate:
    """A list of callbacks invoked together by :meth:`broadcast`.

    Each binding gets a numeric handle; bindings may also be removed by the
    object that owns them.
    """

    def __init__(self) -> None:
        self._entries: List[_Entry] = []
        self._next_handle = 0

    def bind_lambda(self, owner: Any, func: Callable[..., Any]) -> int:
        """Bind ``func`` on behalf of ``owner``; return its handle."""
        if not callable(func):
            raise TypeError("func must be callable")
        handle = self._next_handle
        self._entries.append(_Entry(handle, func, owner))
        self._next_handle = (self._next_handle + 1) & _HANDLE_MASK
        return handle

    def bind(self, method: Callable[..., Any]) -> int:
        """Bind a bound method; its instance becomes the owner."""
        owner = getattr(method, "__self__", None)
        if owner is None:
            raise TypeError("bind expects a bound method; use bind_lambda for other callables")
        return self.bind_lambda(owner, method)

    def broadcast(self, *args: Any) -> None:
        """Call every bound callback with ``args`` in binding order."""
        for entry in list(self._entries):
            entry.func(*args)

    def unbind_all_by_object(self, owner: Any) -> None:
        """Remove every callback bound on behalf of ``owner``."""
        self._entries = [e for e in self._entries if e.owner is not owner]

    def unbind(self, handle: int) -> None:
        """Remove the callback with ``handle``; unknown handles are ignored."""
        self._entries = [e for e in self._entries if e.handle != handle]

    def unbind_all(self) -> None:
        """Remove every callback and restart handle numbering."""
        self._entries.clear()
        self._next_handle = 0

    def __len__(self) -> int:
        return len(self._entries)