"""Event and command pages, their headers and sequence information."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Union

from .cover import Cover

TYPE_URL_PREFIX = "type.googleapis.com/"


@dataclass
class AnyPayload:
    """A packed message: its type URL and serialized bytes."""

    type_url: str = ""
    value: bytes = b""


@dataclass
class ExternalDeferredSequence:
    """A sequence to be assigned later for an externally produced page."""

    external_id: str = ""


@dataclass
class AngzarrDeferredSequence:
    """A sequence to be assigned later for a saga-produced page."""

    source: Cover | None = None
    source_seq: int = 0

    def idempotency_key(self) -> str:
        """Return ``edition:domain:root_hex:source_seq`` for the source."""
        if self.source is None:
            raise ValueError("source required")
        source = self.source
        return (
            f"{source.edition_name()}:{source.domain}:"
            f"{source.root_id_hex() or ''}:{self.source_seq}"
        )


SequenceType = Union[int, ExternalDeferredSequence, AngzarrDeferredSequence, None]


@dataclass
class PageHeader:
    """Holds either an explicit sequence number or a deferred sequence."""

    sequence_type: SequenceType = None

    def explicit_sequence(self) -> int | None:
        """Return the explicit sequence, or None if deferred or unset."""
        if isinstance(self.sequence_type, int) and not isinstance(
            self.sequence_type, bool
        ):
            return self.sequence_type
        return None

    def is_deferred(self) -> bool:
        return isinstance(
            self.sequence_type, (ExternalDeferredSequence, AngzarrDeferredSequence)
        )

    def external_deferred(self) -> ExternalDeferredSequence | None:
        if isinstance(self.sequence_type, ExternalDeferredSequence):
            return self.sequence_type
        return None

    def angzarr_deferred(self) -> AngzarrDeferredSequence | None:
        if isinstance(self.sequence_type, AngzarrDeferredSequence):
            return self.sequence_type
        return None


@dataclass
class PayloadReference:
    """Points to a payload stored outside the page."""

    storage_type: int = 0
    uri: str = ""
    content_hash: bytes = b""
    original_size: int = 0
    stored_at: datetime | None = None


class MergeStrategy(enum.IntEnum):
    """How concurrent commands against the same aggregate are reconciled."""

    MERGE_COMMUTATIVE = 0
    MERGE_STRICT = 1
    MERGE_AGGREGATE_HANDLES = 2
    MERGE_MANUAL = 3


Payload = Union[AnyPayload, PayloadReference, None]


def _sequence_num(header: PageHeader | None) -> int:
    if header is None:
        return 0
    seq = header.explicit_sequence()
    return 0 if seq is None else seq


def _is_deferred(header: PageHeader | None) -> bool:
    return header is not None and header.is_deferred()


def _type_url(payload: Payload) -> str | None:
    if isinstance(payload, AnyPayload):
        return payload.type_url
    return None


def _payload_bytes(payload: Payload) -> bytes | None:
    if isinstance(payload, AnyPayload):
        return payload.value
    return None


def _decode_typed(
    payload: Payload, full_name: str, decoder: Callable[[bytes], Any]
) -> Any:
    if not isinstance(payload, AnyPayload):
        return None
    if payload.type_url != f"{TYPE_URL_PREFIX}{full_name}":
        return None
    try:
        return decoder(payload.value)
    except Exception:
        return None


@dataclass
class EventPage:
    """One event in an event book."""

    header: PageHeader | None = None
    created_at: datetime | None = None
    payload: Payload = None

    def sequence_num(self) -> int:
        """Return the explicit sequence, or 0 when deferred or unset."""
        return _sequence_num(self.header)

    def is_deferred(self) -> bool:
        return _is_deferred(self.header)

    def type_url(self) -> str | None:
        """Return the type URL of an inline payload, if any."""
        return _type_url(self.payload)

    def payload_bytes(self) -> bytes | None:
        """Return the serialized bytes of an inline payload, if any."""
        return _payload_bytes(self.payload)

    def decode_typed(self, full_name: str, decoder: Callable[[bytes], Any]) -> Any:
        """Decode the payload if its type URL is exactly that of ``full_name``.

        Returns None when the payload is missing, the type differs, or the
        decoder fails.
        """
        return _decode_typed(self.payload, full_name, decoder)


@dataclass
class CommandPage:
    """One command in a command book."""

    header: PageHeader | None = None
    merge_strategy: int = MergeStrategy.MERGE_COMMUTATIVE
    payload: Payload = None

    def sequence_num(self) -> int:
        """Return the explicit sequence, or 0 when deferred or unset."""
        return _sequence_num(self.header)

    def is_deferred(self) -> bool:
        return _is_deferred(self.header)

    def type_url(self) -> str | None:
        """Return the type URL of an inline payload, if any."""
        return _type_url(self.payload)

    def payload_bytes(self) -> bytes | None:
        """Return the serialized bytes of an inline payload, if any."""
        return _payload_bytes(self.payload)

    def decode_typed(self, full_name: str, decoder: Callable[[bytes], Any]) -> Any:
        """Decode the payload if its type URL is exactly that of ``full_name``.

        Returns None when the payload is missing, the type differs, or the
        decoder fails.
        """
        return _decode_typed(self.payload, full_name, decoder)

    def resolved_merge_strategy(self) -> MergeStrategy:
        """Return the merge strategy, defaulting to commutative when unknown."""
        try:
            return MergeStrategy(self.merge_strategy)
        except ValueError:
            return MergeStrategy.MERGE_COMMUTATIVE