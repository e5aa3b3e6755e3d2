"""Server interceptors that reset an idle timer on every request."""

from __future__ import annotations

from typing import Any, Callable, Protocol


class _Resettable(Protocol):
    def reset(self) -> object: ...


class IdleTimerInterceptor:
    """Resets ``idle_timer`` at the start of each request, then calls on."""

    def __init__(self, idle_timer: _Resettable) -> None:
        self._idle_timer = idle_timer

    def stream_interceptor(
        self,
        server: Any,
        stream: Any,
        info: Any,
        handler: Callable[[Any, Any], Any],
    ) -> Any:
        """Reset the timer and run the streaming ``handler``."""
        self._idle_timer.reset()
        return handler(server, stream)

    def unary_interceptor(
        self,
        context: Any,
        request: Any,
        info: Any,
        handler: Callable[[Any, Any], Any],
    ) -> Any:
        """Reset the timer and run the unary ``handler``."""
        self._idle_timer.reset()
        return handler(context, request)