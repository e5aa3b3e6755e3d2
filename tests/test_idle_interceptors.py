import pytest

from remotecache.idle_interceptors import IdleTimerInterceptor


class CountingTimer:
    def __init__(self):
        self.resets = 0

    def reset(self):
        self.resets += 1


def test_unary_interceptor_resets_and_passes_through():
    timer = CountingTimer()
    interceptor = IdleTimerInterceptor(timer)
    seen = []

    def handler(context, request):
        seen.append((context, request, timer.resets))
        return request * 2

    result = interceptor.unary_interceptor("ctx", 21, None, handler)
    assert result == 42
    assert seen == [("ctx", 21, 1)]
    assert timer.resets == 1


def test_stream_interceptor_resets_and_passes_through():
    timer = CountingTimer()
    interceptor = IdleTimerInterceptor(timer)

    def handler(server, stream):
        return (server, stream, timer.resets)

    assert interceptor.stream_interceptor("srv", "stream", None, handler) == (
        "srv",
        "stream",
        1,
    )


def test_each_request_resets_again():
    timer = CountingTimer()
    interceptor = IdleTimerInterceptor(timer)
    for _ in range(3):
        interceptor.unary_interceptor(None, None, None, lambda c, r: None)
    interceptor.stream_interceptor(None, None, None, lambda s, st: None)
    assert timer.resets == 4


def test_handler_errors_propagate_after_reset():
    timer = CountingTimer()
    interceptor = IdleTimerInterceptor(timer)

    def handler(context, request):
        raise KeyError("missing")

    with pytest.raises(KeyError):
        interceptor.unary_interceptor(None, None, None, handler)
    assert timer.resets == 1