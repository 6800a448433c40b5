from .query import Query, QueryString
from .target import (
    STAR,
    AbsolutePath,
    AbsoluteUri,
    Authority,
    RequestTarget,
    Star,
    parse_target,
    raw_query,
)
from .request import Request, parse
