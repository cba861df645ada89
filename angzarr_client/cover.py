"""Covers: the identity of an aggregate (domain, root, correlation, edition)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .constants import DEFAULT_EDITION, UNKNOWN_DOMAIN
from .edition import Edition


@dataclass
class ProtoUuid:
    """A UUID as carried on the wire: raw bytes."""

    value: bytes = b""

    def to_uuid(self) -> uuid.UUID:
        """Convert to a standard UUID; raise ValueError if the bytes are not 16 long."""
        if len(self.value) != 16:
            raise ValueError(
                f"invalid UUID length: expected 16 bytes, found {len(self.value)}"
            )
        return uuid.UUID(bytes=bytes(self.value))

    def to_hex(self) -> str:
        """Return the raw bytes hex-encoded."""
        return bytes(self.value).hex()

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> ProtoUuid:
        """Build from a standard UUID."""
        return cls(value=value.bytes)


class CoverView:
    """Accessors shared by a cover and by anything that carries one."""

    def _view_cover(self) -> Cover | None:
        raise NotImplementedError

    def _view_domain(self) -> str:
        cover = self._view_cover()
        return cover.domain if cover is not None else UNKNOWN_DOMAIN

    def _view_correlation_id(self) -> str:
        cover = self._view_cover()
        return cover.correlation_id if cover is not None else ""

    def root_id_hex(self) -> str | None:
        """Return the root UUID hex-encoded, if present."""
        cover = self._view_cover()
        if cover is None or cover.root is None:
            return None
        return cover.root.to_hex()

    def root_uuid(self) -> uuid.UUID | None:
        """Return the root UUID, if present and well formed."""
        cover = self._view_cover()
        if cover is None or cover.root is None:
            return None
        try:
            return cover.root.to_uuid()
        except ValueError:
            return None

    def has_correlation_id(self) -> bool:
        return bool(self._view_correlation_id())

    def edition_name(self) -> str:
        """Return the edition name, or the main timeline's name when unset."""
        return self.edition_opt() or DEFAULT_EDITION

    def edition_opt(self) -> str | None:
        """Return the edition name if set and non-empty, without defaulting."""
        cover = self._view_cover()
        if cover is None or cover.edition is None or not cover.edition.name:
            return None
        return cover.edition.name

    def routing_key(self) -> str:
        """Return the bus routing key, which is the domain."""
        return self._view_domain()

    def cache_key(self) -> str:
        """Return a key of the form ``edition:domain:root_hex``."""
        root = self.root_id_hex() or ""
        return f"{self.edition_name()}:{self._view_domain()}:{root}"


@dataclass
class Cover(CoverView):
    """Identifies the aggregate a book belongs to."""

    domain: str = ""
    root: ProtoUuid | None = None
    correlation_id: str = ""
    edition: Edition | None = None

    def _view_cover(self) -> Cover | None:
        return self

    def stamp_edition_if_empty(self, edition: str) -> None:
        """Set the edition to ``edition`` unless a non-empty one is already set."""
        if self.edition is None or not self.edition.name:
            self.edition = Edition.implicit(edition)


class Covered(CoverView):
    """Mixin for messages holding an optional ``cover`` attribute."""

    cover: Cover | None

    def _view_cover(self) -> Cover | None:
        return self.cover

    def domain(self) -> str:
        """Return the cover's domain, or the unknown domain if there is no cover."""
        return self._view_domain()

    def correlation_id(self) -> str:
        """Return the cover's correlation ID, or an empty string."""
        return self._view_correlation_id()

    def edition(self) -> str:
        """Return the edition name, defaulting to the main timeline."""
        return self.edition_name()