from .query import Query
from .target import RequestTarget, parse_target, raw_query


def parse(target: RequestTarget) -> Query:
    """Decode the query of ``target``; an empty Query when it has none."""
    return Query.parse(raw_query(target))


class Request:
    """Per-request context. The query is parsed on first access and kept
    for the lifetime of the request."""

    __slots__ = ("_target", "_query")

    def __init__(self, target: "RequestTarget | str"):
        if isinstance(target, str):
            target = parse_target(target)
        self._target = target
        self._query: Query | None = None

    @property
    def target(self) -> RequestTarget:
        return self._target

    @property
    def query(self) -> Query:
        if self._query is None:
            self._query = parse(self._target)
        return self._query

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self._target)
