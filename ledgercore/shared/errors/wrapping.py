"""
Error wrapping helpers.

Subsystems annotate an error with context and client-facing detail without
losing its root cause. Only WrappedError layers are unwrapped when resolving
the root cause. An error raised with `raise Outer(...) from err` is a
translation: Outer is its own root, whatever caused it.

No framework imports allowed.
"""

DETAIL_SEPARATOR = "; "


class WrappedError(Exception):
    """An error annotated with context and optional detail.

    Attributes:
        cause: The wrapped error.
        message: Context prefix added at the wrapping site.
        detail: Client-facing explanatory text added at the wrapping site.
    """

    def __init__(self, cause: BaseException, message: str = "", detail: str = "") -> None:
        self.cause = cause
        self.message = message
        self.detail = detail
        super().__init__(f"{message}: {cause}" if message else str(cause))
        self.__cause__ = cause


def wrap(err, message: str = "", *, detail: str = ""):
    """Wrap err with a context message and optional detail.

    Returns None when err is None so call sites can wrap unconditionally.
    """
    if err is None:
        return None
    return WrappedError(err, message, detail)


def with_detail(err, text: str):
    """Attach client-facing detail text to err."""
    if err is None or not text:
        return err
    return wrap(err, detail=text)


def _cause(err):
    if not isinstance(err, WrappedError):
        return None
    return err.cause


def _layers(err) -> list:
    """Return the wrapping chain of err, outermost first, root last."""
    chain = [err]
    seen = {id(err)}
    cause = _cause(err)
    while cause is not None and id(cause) not in seen:
        chain.append(cause)
        seen.add(id(cause))
        cause = _cause(cause)
    return chain


def root(err):
    """Return the terminal cause of err after unwrapping every layer."""
    return _layers(err)[-1]


def _own_detail(err) -> str:
    text = getattr(err, "detail", None)
    return text if isinstance(text, str) else ""


def detail(err) -> str:
    """Return the detail text attached to err.

    Detail added by wrapping layers takes precedence over the root cause's
    own detail. Several layers' details are joined innermost first.
    """
    chain = _layers(err)
    attached = [_own_detail(layer) for layer in reversed(chain[:-1])]
    attached = [text for text in attached if text]
    if attached:
        return DETAIL_SEPARATOR.join(attached)
    return _own_detail(chain[-1])
