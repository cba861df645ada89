"""Shared constants and correlation metadata helpers."""

from __future__ import annotations

CORRELATION_ID_HEADER = "x-correlation-id"
"""gRPC metadata key for correlation ID propagation."""

UNKNOWN_DOMAIN = "unknown"
"""Fallback domain when a cover is missing."""

PROJECTION_DOMAIN_PREFIX = "_projection"
"""Domain prefix for synthetic projection event books."""

PROJECTION_TYPE_URL = "angzarr.Projection"
"""Type URL for serialized Projection messages in synthetic event books."""

WILDCARD_DOMAIN = "*"
"""Domain that matches any domain."""

META_ANGZARR_DOMAIN = "_angzarr"
"""The meta domain for framework infrastructure."""

DEFAULT_EDITION = "angzarr"
"""Name of the main timeline; an empty edition name means the same."""


def _is_valid_metadata_value(value: str) -> bool:
    return all(ch == "\t" or 32 <= ord(ch) < 127 for ch in value)


def correlation_metadata(correlation_id: str) -> tuple[tuple[str, str], ...]:
    """Return gRPC metadata pairs carrying the correlation ID.

    Empty IDs and IDs that are not valid header values yield no metadata.
    """
    if not correlation_id or not _is_valid_metadata_value(correlation_id):
        return ()
    return ((CORRELATION_ID_HEADER, correlation_id),)