from datetime import datetime, timezone

import pytest

from angzarr_client.cover import Cover, ProtoUuid
from angzarr_client.edition import Edition
from angzarr_client.pages import (
    AngzarrDeferredSequence,
    AnyPayload,
    CommandPage,
    EventPage,
    ExternalDeferredSequence,
    MergeStrategy,
    PageHeader,
    PayloadReference,
)


def _header(seq):
    return PageHeader(sequence_type=seq)


def test_event_page_sequence_num():
    assert EventPage(header=_header(42)).sequence_num() == 42


def test_event_page_without_header_sequence_zero():
    assert EventPage().sequence_num() == 0


def test_event_page_type_url():
    page = EventPage(
        header=_header(1),
        payload=AnyPayload(type_url="type.googleapis.com/test.Event"),
    )
    assert page.type_url() == "type.googleapis.com/test.Event"


def test_event_page_type_url_none():
    assert EventPage(header=_header(0)).type_url() is None


def test_event_page_payload():
    page = EventPage(header=_header(1), payload=AnyPayload("test", bytes([1, 2, 3])))
    assert page.payload_bytes() == bytes([1, 2, 3])


def test_event_page_payload_none():
    assert EventPage(header=_header(0)).payload_bytes() is None


def test_event_page_external_payload_has_no_inline_data():
    page = EventPage(
        header=_header(0),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        payload=PayloadReference(storage_type=2, uri="s3://bucket/key"),
    )
    assert page.type_url() is None
    assert page.payload_bytes() is None


def test_command_page_sequence_num():
    assert CommandPage(header=_header(77)).sequence_num() == 77


def test_command_page_type_url():
    page = CommandPage(
        header=_header(1),
        payload=AnyPayload(type_url="type.googleapis.com/test.Command"),
    )
    assert page.type_url() == "type.googleapis.com/test.Command"


def test_command_page_type_url_none():
    assert CommandPage(header=_header(1)).type_url() is None


def test_command_page_payload():
    page = CommandPage(header=_header(1), payload=AnyPayload("test", bytes([4, 5, 6])))
    assert page.payload_bytes() == bytes([4, 5, 6])


def test_merge_strategy_default_commutative():
    assert CommandPage().resolved_merge_strategy() is MergeStrategy.MERGE_COMMUTATIVE


def test_merge_strategy_known_value():
    page = CommandPage(merge_strategy=MergeStrategy.MERGE_STRICT)
    assert page.resolved_merge_strategy() is MergeStrategy.MERGE_STRICT


def test_merge_strategy_unknown_value_falls_back():
    page = CommandPage(merge_strategy=99)
    assert page.resolved_merge_strategy() is MergeStrategy.MERGE_COMMUTATIVE


def test_header_explicit_sequence():
    header = _header(5)
    assert header.explicit_sequence() == 5
    assert header.is_deferred() is False
    assert header.external_deferred() is None
    assert header.angzarr_deferred() is None


def test_header_external_deferred():
    ext = ExternalDeferredSequence(external_id="ext-1")
    header = _header(ext)
    assert header.explicit_sequence() is None
    assert header.is_deferred() is True
    assert header.external_deferred() is ext
    assert header.angzarr_deferred() is None


def test_header_angzarr_deferred():
    ang = AngzarrDeferredSequence(source=Cover(domain="order"), source_seq=3)
    header = _header(ang)
    assert header.is_deferred() is True
    assert header.angzarr_deferred() is ang
    assert header.external_deferred() is None


def test_deferred_page_sequence_is_zero():
    page = EventPage(header=_header(ExternalDeferredSequence()))
    assert page.sequence_num() == 0
    assert page.is_deferred() is True


def test_page_without_header_not_deferred():
    assert CommandPage().is_deferred() is False


def test_idempotency_key():
    root = bytes.fromhex("550e8400e29b41d4a716446655440000")
    ang = AngzarrDeferredSequence(
        source=Cover(domain="order", root=ProtoUuid(root)), source_seq=7
    )
    assert ang.idempotency_key() == "angzarr:order:550e8400e29b41d4a716446655440000:7"


def test_idempotency_key_with_edition_and_no_root():
    ang = AngzarrDeferredSequence(
        source=Cover(domain="order", edition=Edition.implicit("v2")), source_seq=1
    )
    assert ang.idempotency_key() == "v2:order::1"


def test_idempotency_key_requires_source():
    with pytest.raises(ValueError):
        AngzarrDeferredSequence(source_seq=1).idempotency_key()


def _decode_text(data):
    return data.decode("utf-8")


def test_decode_typed_matches_exact_type():
    page = EventPage(
        payload=AnyPayload("type.googleapis.com/orders.OrderCreated", b"hello")
    )
    assert page.decode_typed("orders.OrderCreated", _decode_text) == "hello"


def test_decode_typed_type_mismatch():
    page = EventPage(
        payload=AnyPayload("type.googleapis.com/orders.OrderCreated", b"hello")
    )
    assert page.decode_typed("orders.ItemAdded", _decode_text) is None


def test_decode_typed_decoder_failure():
    page = CommandPage(
        payload=AnyPayload("type.googleapis.com/orders.Create", b"\xff\xff")
    )
    assert page.decode_typed("orders.Create", _decode_text) is None


def test_decode_typed_missing_payload():
    assert CommandPage().decode_typed("orders.Create", _decode_text) is None