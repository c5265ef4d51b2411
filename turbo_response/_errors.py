from __future__ import annotations

DEFAULT_MESSAGE = "An error occurred"


class TurboException(Exception):
    """
    Throwable carrying the same metadata shape as Fail.

    Raised by unwrap() when the stored error is not an exception itself,
    and usable by callers who want one exception type with title/message.
    """

    __slots__ = ("_error", "_title", "_message", "_stack_trace")

    def __init__(
        self,
        *,
        error: object | None = None,
        title: str | None = None,
        message: str | None = None,
        stack_trace: str | None = None,
    ) -> None:
        self._error = error
        self._title = title
        self._message = message or DEFAULT_MESSAGE
        self._stack_trace = stack_trace
        super().__init__(self._message)

    def __reduce__(self) -> tuple[object, ...]:
        # args holds only the message; rebuild through the keyword-only constructor
        return (
            _rebuild,
            (self.__class__, self._error, self._title, self._message, self._stack_trace),
        )

    @property
    def error(self) -> object | None:
        """The underlying error value, if any."""
        return self._error

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def message(self) -> str:
        return self._message

    @property
    def stack_trace(self) -> str | None:
        return self._stack_trace

    @property
    def has_title(self) -> bool:
        return self._title is not None

    @property
    def has_message(self) -> bool:
        return bool(self._message)

    @property
    def has_error(self) -> bool:
        return self._error is not None

    def __repr__(self) -> str:
        return (
            f"TurboException(error={self._error!r}, title={self._title!r}, "
            f"message={self._message!r})"
        )


def _rebuild(
    cls: type[TurboException],
    error: object | None,
    title: str | None,
    message: str,
    stack_trace: str | None,
) -> TurboException:
    return cls(error=error, title=title, message=message, stack_trace=stack_trace)


__all__ = ("DEFAULT_MESSAGE", "TurboException")
