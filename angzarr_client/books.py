"""Event and command books: a cover plus an ordered run of pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .cover import Cover, Covered
from .pages import AnyPayload, CommandPage, EventPage, MergeStrategy


@dataclass
class Snapshot:
    """Aggregate state captured at a sequence."""

    sequence: int = 0
    state: AnyPayload | None = None
    retention: int = 0


@dataclass
class EventBook(Covered):
    """The events of one aggregate, optionally starting from a snapshot.

    ``next_sequence`` is set by the framework on load; it is 0 when unset.
    """

    cover: Cover | None = None
    pages: list[EventPage] = field(default_factory=list)
    snapshot: Snapshot | None = None
    next_sequence: int = 0

    def is_empty(self) -> bool:
        """Return True if the book holds no pages."""
        return not self.pages

    def last_page(self) -> EventPage | None:
        return self.pages[-1] if self.pages else None

    def first_page(self) -> EventPage | None:
        return self.pages[0] if self.pages else None


@dataclass
class CommandBook(Covered):
    """The commands addressed to one aggregate."""

    cover: Cover | None = None
    pages: list[CommandPage] = field(default_factory=list)

    def command_sequence(self) -> int:
        """Return the sequence of the first command page, or 0 if there is none."""
        first = self.first_command()
        return first.sequence_num() if first is not None else 0

    def first_command(self) -> CommandPage | None:
        return self.pages[0] if self.pages else None

    def merge_strategy(self) -> MergeStrategy:
        """Return the first page's merge strategy, commutative if there are no pages."""
        first = self.first_command()
        if first is None:
            return MergeStrategy.MERGE_COMMUTATIVE
        return first.resolved_merge_strategy()


def calculate_next_sequence(
    pages: Sequence[EventPage] | Iterable[EventPage],
    snapshot: Snapshot | None = None,
) -> int:
    """Return the sequence that follows the pages, or the snapshot, or 0.

    The last page's sequence plus one wins; without pages the snapshot's
    sequence plus one is used; with neither the result is 0.
    """
    pages = list(pages)
    if pages:
        return pages[-1].sequence_num() + 1
    if snapshot is not None:
        return snapshot.sequence + 1
    return 0


def calculate_set_next_seq(book: EventBook) -> None:
    """Compute and store ``next_sequence`` on the book."""
    book.next_sequence = calculate_next_sequence(book.pages, book.snapshot)