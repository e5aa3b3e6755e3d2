"""Attach a prefix and optional cancellation context to an error."""

from __future__ import annotations


class _AnnotatedError(Exception):
    """An error wrapped with a descriptive prefix."""

    def __init__(
        self,
        prefix: str,
        error: BaseException,
        context_error: BaseException | None,
    ) -> None:
        if context_error is None:
            message = f"{prefix}: {error}"
        else:
            message = f"{prefix}: {error} ({context_error})"
        super().__init__(message)
        self.prefix = prefix
        self.error = error
        self.context_error = context_error


def annotate(
    prefix: str,
    err: BaseException,
    context_error: BaseException | None = None,
) -> Exception:
    """Return a new error that prefixes ``err``.

    If ``context_error`` is given (the reason an operation's context was
    cancelled or timed out), it is appended in parentheses. The original
    error is kept as the ``__cause__`` of the result.
    """
    annotated = _AnnotatedError(prefix, err, context_error)
    annotated.__cause__ = err
    return annotated