import re
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5
# Keeps (page - 1) * limit inside a BSON int64 skip
MAX_PARAM = 2**31 - 1

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?)(\d+)")


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def parse_positive_int(raw: str | None, default: int) -> int:
    """Parse the leading integer of ``raw``; fall back to ``default`` when
    there is none or it is below 1, and cap it at ``MAX_PARAM``."""
    if raw is None:
        return default
    match = _INT_PREFIX_RE.match(raw)
    if not match:
        return default
    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if sign == "-" or not digits:
        return default
    # Long inputs would trip int()'s digit limit
    if len(digits) > len(str(MAX_PARAM)):
        return MAX_PARAM
    return min(int(digits), MAX_PARAM)


def parse_page_params(page: str | None, limit: str | None) -> PageParams:
    return PageParams(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
    )
