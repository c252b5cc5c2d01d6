import logging
import re
from dataclasses import dataclass, field

from pymongo import ASCENDING, DESCENDING

from hostel_api.exceptions.custom import InvalidRatingError

logger = logging.getLogger(__name__)

SORT_LOW_TO_HIGH = "low-to-high"
SORT_HIGH_TO_LOW = "high-to-low"

# Leading decimal prefix, the part JavaScript's parseFloat would accept
_FLOAT_PREFIX_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


@dataclass
class HostelQuery:
    filter: dict = field(default_factory=dict)
    sort: list[tuple[str, int]] = field(default_factory=list)


def parse_rating_threshold(token: str) -> float | None:
    match = _FLOAT_PREFIX_RE.match(token)
    if not match:
        return None
    return float(match.group(1))


def build_hostel_query(category: str | None, rating: str | None) -> HostelQuery:
    """Turn the ``category``/``rating`` query parameters into a store query.

    ``rating`` is either a sort token (``low-to-high``/``high-to-low``) or a
    minimum rating. Anything else raises ``InvalidRatingError`` so no query is
    ever issued for it.
    """
    query = HostelQuery()

    if category:
        query.filter["category"] = category
        logger.info("Filtering by category: %s", category)

    if rating:
        if rating == SORT_LOW_TO_HIGH:
            query.sort.append(("rating", ASCENDING))
            logger.info("Sorting by rating: low-to-high")
        elif rating == SORT_HIGH_TO_LOW:
            query.sort.append(("rating", DESCENDING))
            logger.info("Sorting by rating: high-to-low")
        else:
            threshold = parse_rating_threshold(rating)
            if threshold is None:
                raise InvalidRatingError(rating)
            query.filter["rating"] = {"$gte": threshold}
            logger.info("Filtering by rating: %s", threshold)

    return query
