"""Type-handler registry with exact-type dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import HandlerNotFoundError, RegistrySealedError

if TYPE_CHECKING:
    from .context import ValidationContext

logger = logging.getLogger(__name__)

T = TypeVar("T")
HandlerFunc = Callable[[Any, "ValidationContext"], None]


class TypeHandlerRegistry:
    """Maps a concrete class to the routine that validates its instances.

    Lookup uses ``type(value)`` only.  A handler bound to ``Animal`` is
    never used for a ``Dog`` instance, and vice versa.

    **Overwrite:** registering a second handler for the same type
    replaces the first one.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], HandlerFunc] = {}
        self._sealed = False

    # ── Registration ─────────────────────────────────────────────

    def register(
        self,
        type_: type[T],
        handler: Callable[[T, ValidationContext], None],
    ) -> None:
        if not isinstance(type_, type):
            raise TypeError(f"Expected a class, got {type_!r}")
        if self._sealed:
            raise RegistrySealedError("TypeHandlerRegistry", type_.__qualname__)
        if type_ in self._handlers:
            logger.debug("Replacing type handler for %s", type_.__qualname__)
        self._handlers[type_] = handler
        logger.debug(
            "Registered type handler %s -> %s",
            type_.__qualname__,
            getattr(handler, "__qualname__", type(handler).__name__),
        )

    def handles(
        self, type_: type[T]
    ) -> Callable[
        [Callable[[T, ValidationContext], None]],
        Callable[[T, ValidationContext], None],
    ]:
        """Decorator form of :meth:`register`."""

        def decorator(
            handler: Callable[[T, ValidationContext], None],
        ) -> Callable[[T, ValidationContext], None]:
            self.register(type_, handler)
            return handler

        return decorator

    def seal(self) -> None:
        if not self._sealed:
            self._sealed = True
            logger.debug(
                "Sealed type handler registry with %d handlers", len(self._handlers)
            )

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    # ── Lookup ───────────────────────────────────────────────────

    def get(self, type_: type[Any]) -> HandlerFunc | None:
        return self._handlers.get(type_)

    def has(self, type_: type[Any]) -> bool:
        return type_ in self._handlers

    def resolve(self, value: Any) -> HandlerFunc:
        """Return the handler bound to ``type(value)``.

        Raises:
            HandlerNotFoundError: If that exact type has no handler.
        """
        handler = self._handlers.get(type(value))
        if handler is None:
            raise HandlerNotFoundError(type(value), list(self._handlers))
        return handler

    @property
    def types(self) -> list[type[Any]]:
        return list(self._handlers)

    def copy(self) -> TypeHandlerRegistry:
        clone = TypeHandlerRegistry()
        clone._handlers = dict(self._handlers)
        return clone

    def __contains__(self, type_: object) -> bool:
        return type_ in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["HandlerFunc", "TypeHandlerRegistry"]
