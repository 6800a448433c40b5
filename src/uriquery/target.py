import logging
import typing as _ty
import uritools as _uritools

logger = logging.getLogger(__name__)


class AbsolutePath(_ty.NamedTuple):
    """origin-form: ``/path?query``"""

    path: str


class AbsoluteUri(_ty.NamedTuple):
    """absolute-form: a full URI, already split into its components."""

    uri: _uritools.SplitResult

    @classmethod
    def from_string(cls, uri: str):
        return cls(_uritools.urisplit(uri))

    def __str__(self) -> str:
        return self.uri.geturi()


class Authority(_ty.NamedTuple):
    """authority-form, as sent with CONNECT: ``host:port``"""

    authority: str


class Star(_ty.NamedTuple):
    """asterisk-form, as sent with a server-wide OPTIONS."""

    def __str__(self) -> str:
        return "*"


STAR = Star()

RequestTarget: _ty.TypeAlias = "AbsolutePath | AbsoluteUri | Authority | Star"


def parse_target(raw: str) -> RequestTarget:
    if not raw:
        raise ValueError("empty request-target")
    if raw == "*":
        return STAR
    if raw.startswith("/"):
        return AbsolutePath(raw)
    if "/" in raw:
        return AbsoluteUri.from_string(raw)
    return Authority(raw)


def _split_path(path: str) -> _uritools.SplitResult | None:
    if not path.startswith("/"):
        return None
    # a placeholder authority keeps a leading "//" inside the path
    return _uritools.urisplit(f"//_{path}")


def raw_query(target: RequestTarget) -> str | None:
    """Locate the still-encoded query component of a request-target.

    Authority and asterisk forms never carry one.
    """
    if isinstance(target, AbsoluteUri):
        return target.uri.query
    if isinstance(target, AbsolutePath):
        parts = _split_path(target.path)
        if parts is None:
            # request-line parsing should have rejected this already;
            # treat it as having no query instead of failing the request
            logger.debug("Not an absolute path, ignoring query: %r", target.path)
            return None
        return parts.query
    if isinstance(target, (Authority, Star)):
        return None
    raise TypeError(
        f"expected a request-target, not {type(target).__name__!r}"
    )
