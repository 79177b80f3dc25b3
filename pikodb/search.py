"""Search-time settings and defaults."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from pikodb.index import IndexBuildQuality

MetadataFilter = Dict[str, str]

DEFAULT_INDEX_BUILD_QUALITY = IndexBuildQuality.STANDARD

# With filters, this many times the limit is fetched before filtering.
DEFAULT_OVERFETCH_FACTOR = 5


class EfSearch(Enum):
    """Breadth of the graph search; the value is ef."""

    FAST = 50
    BALANCED = 200
    ACCURATE = 500