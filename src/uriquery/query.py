import typing as _ty
import uritools as _uritools

_QueryLike: _ty.TypeAlias = (
    "str | _ty.Sequence[tuple[str, str | None]] "
    "| _ty.Mapping[str, str | None | _ty.Sequence[str | None]]"
)


class QueryString(str):
    """Raw ``application/x-www-form-urlencoded`` query text."""

    SEPARATOR = "&"
    ENCODING = "utf-8"
    ERRORS = "replace"

    def __new__(cls, query: _QueryLike = ""):
        if isinstance(query, str):
            pass
        else:
            if isinstance(query, _ty.Mapping):
                items = []
                for name, values in query.items():
                    if not isinstance(values, (list, tuple)):
                        values = (values,)
                    items.extend((name, value) for value in values)
                query = items
            query = cls.SEPARATOR.join(cls._encode_item(k, v) for k, v in query)

        return str.__new__(cls, query)

    @classmethod
    def _quote(cls, value) -> str:
        # only unreserved characters survive, so "+" is always escaped
        return _uritools.uriencode(str(value), "", cls.ENCODING).decode("ascii")

    @classmethod
    def _encode_item(cls, name: str, value: str | None) -> str:
        if value is None:
            return cls._quote(name)
        return f"{cls._quote(name)}={cls._quote(value)}"

    def _unquote(query, value: str) -> str:
        return _uritools.uridecode(
            value.replace("+", " "), query.ENCODING, query.ERRORS
        )

    def decode(query) -> list[tuple[str, str | None]]:
        items: list[tuple[str, str | None]] = []
        for field in str(query).split(query.SEPARATOR):
            if not field:
                continue
            name, eq, value = field.partition("=")
            items.append((query._unquote(name), query._unquote(value) if eq else None))
        return items

    def to_dict(query):
        query_: dict[str, list[str]] = {}
        for k, v in query.decode():
            query_.setdefault(k, []).append("" if v is None else v)
        return query_


class Query(_ty.Mapping[str, tuple[str, ...]]):
    """Read-only mapping of parameter name to the values supplied for it,
    in the order they were supplied.

    Built once per request and never mutated afterwards.
    """

    __slots__ = ("_store",)

    def __init__(
        self, store: _ty.Mapping[str, _ty.Iterable[str]] | None = None
    ) -> None:
        object.__setattr__(
            self, "_store", {k: tuple(v) for k, v in (store or {}).items()}
        )

    @classmethod
    def parse(
        cls, raw: str | None, query_cls: type[QueryString] = QueryString
    ) -> "Query":
        if raw is None:
            return cls()
        return cls(query_cls(raw).to_dict())

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self._store[key]

    def __iter__(self):
        return iter(self._store)

    def __len__(self):
        return len(self._store)

    def __contains__(self, key: object):
        return key in self._store

    def __eq__(self, other: object):
        if isinstance(other, Query):
            return self._store == other._store
        if isinstance(other, _ty.Mapping):
            return self._store == dict(other.items())
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self._store)

    def get(self, key: str, default=None) -> tuple[str, ...] | None:
        return self._store.get(key, default)

    def get_or(self, key: str, default: str) -> list[str]:
        values = self._store.get(key)
        if values is None:
            return [default]
        return list(values)

    def encode(self, query_cls: type[QueryString] = QueryString) -> QueryString:
        return query_cls(self._store)
