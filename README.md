# angzarr-client

Plain-Python message types and helpers for working with Angzarr event books,
command books, covers, editions and client errors. The package has no
dependencies beyond the standard library.

## Install

```
pip install angzarr-client
```

## What is inside

- `angzarr_client.errors` – `ClientError` and its subclasses
  (`ConnectionFailedError`, `TransportError`, `GrpcError`,
  `InvalidArgumentError`, `InvalidTimestampError`), the `Status` dataclass
  and the `StatusCode` enum, and `from_status` to wrap a status in a
  `GrpcError`. Every error offers `message()`, `code()`, `status()`,
  `is_not_found()`, `is_precondition_failed()`, `is_invalid_argument()` and
  `is_connection_error()`.
- `angzarr_client.constants` – shared names such as `DEFAULT_EDITION`
  (`"angzarr"`), `UNKNOWN_DOMAIN` (`"unknown"`), `WILDCARD_DOMAIN`,
  `CORRELATION_ID_HEADER`, and `correlation_metadata(correlation_id)`, which
  returns metadata pairs `(("x-correlation-id", id),)`, or `()` for an empty
  id or one that is not a valid header value.
- `angzarr_client.edition` – `Edition` and `DomainDivergence`, with
  `Edition.main_timeline()`, `Edition.implicit(name)`,
  `Edition.explicit(name, divergences)`, `is_empty()`, `is_main_timeline()`,
  `name_or_default()` and `divergence_for(domain)`.
- `angzarr_client.cover` – `Cover`, `ProtoUuid` (`to_uuid()`, `to_hex()`,
  `ProtoUuid.from_uuid(u)`) and the `Covered` mixin, which gives books
  `domain()`, `correlation_id()`, `edition()`, `root_uuid()`, `root_id_hex()`,
  `has_correlation_id()`, `edition_opt()`, `routing_key()` and `cache_key()`.
  `Cover.stamp_edition_if_empty(name)` sets an edition only when none is set.
- `angzarr_client.pages` – `EventPage`, `CommandPage`, `PageHeader`,
  `AnyPayload`, `PayloadReference`, `MergeStrategy` and the deferred-sequence
  types `ExternalDeferredSequence` and `AngzarrDeferredSequence`.
  A page's `decode_typed(full_name, decoder)` decodes the payload only when its
  type URL is exactly `type.googleapis.com/<full_name>`.
- `angzarr_client.books` – `EventBook`, `CommandBook`, `Snapshot`,
  `calculate_next_sequence(pages, snapshot)` and `calculate_set_next_seq(book)`.

## Example

```python
import uuid

from angzarr_client.books import EventBook, calculate_set_next_seq
from angzarr_client.cover import Cover, ProtoUuid
from angzarr_client.pages import EventPage, PageHeader

root = uuid.uuid4()
book = EventBook(
    cover=Cover(domain="orders", correlation_id="corr-123", root=ProtoUuid.from_uuid(root)),
    pages=[EventPage(header=PageHeader(sequence_type=4))],
)
calculate_set_next_seq(book)

assert book.next_sequence == 5
assert book.domain() == "orders"
assert book.root_uuid() == root
assert book.cache_key() == f"angzarr:orders:{root.hex}"
```

Errors are raised as exceptions:

```python
from angzarr_client.errors import Status, StatusCode, from_status

err = from_status(Status(StatusCode.NOT_FOUND, "missing"))
assert err.is_not_found()
assert err.message() == "missing"
assert str(err) == "grpc error: " + str(err.status())
```

## What this package does not do

It holds message types and helpers only. It does not open connections, send
commands or run queries against a server, does not serialize messages to the
wire format, and does not host command handlers, sagas, projectors or process
managers. `correlation_metadata` builds metadata pairs for a caller's own
transport to send.

## Running the tests

```
pip install "angzarr-client[test]"
pytest
```