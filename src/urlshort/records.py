"""Redirect records and the path mapping built from them.

A ``RedirectRecord`` is one exact-match rule. ``build_mapping`` folds an
ordered sequence of records into a read-only ``path -> url`` lookup.
Duplicate paths are not an error: the later record wins.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger("urlshort.records")


@dataclass(frozen=True, slots=True)
class RedirectRecord:
    """One redirect rule: requests for ``path`` go to ``url``."""

    path: str
    url: str


def build_mapping(records: Iterable[RedirectRecord]) -> Mapping[str, str]:
    """Build the path mapping from *records*, in order.

    Later records overwrite earlier ones on key collision. The result
    is a read-only view; nothing else holds the underlying dict.
    """
    mappings: dict[str, str] = {}
    for record in records:
        if record.path in mappings:
            logger.debug(
                "Redirect for %s overridden: %s -> %s",
                record.path,
                mappings[record.path],
                record.url,
            )
        mappings[record.path] = record.url
    logger.debug("Built redirect mapping with %d paths", len(mappings))
    return MappingProxyType(mappings)
