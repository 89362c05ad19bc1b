from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

OBJECT_CREATED_PUT = "ObjectCreated:Put"
OBJECT_REMOVED_DELETE = "ObjectRemoved:Delete"


@dataclass(frozen=True)
class ChangeRecord:
    event_name: str | None
    bucket_name: str
    object_key: str


def parse_records(event: Mapping[str, Any]) -> list[ChangeRecord]:
    """Map the S3 notification payload onto ChangeRecords, keeping batch order.

    An entry without an event name is kept and later ignored; one missing its
    bucket or key fails the whole batch.
    """
    if not isinstance(event, Mapping):
        raise ValueError("Event payload must be a dict")
    raw_records = event.get("Records")
    if not isinstance(raw_records, list):
        raise ValueError("Event payload must carry a Records list")
    return [_parse_record(raw, index) for index, raw in enumerate(raw_records)]


def _parse_record(raw: Any, index: int) -> ChangeRecord:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Records[{index}] must be a dict")
    s3 = _ensure_mapping(raw.get("s3"))
    bucket = _ensure_mapping(s3.get("bucket"))
    obj = _ensure_mapping(s3.get("object"))
    return ChangeRecord(
        event_name=_optional_str(raw.get("eventName")),
        bucket_name=_required_str(bucket.get("name"), f"Records[{index}].s3.bucket.name"),
        object_key=_required_str(obj.get("key"), f"Records[{index}].s3.object.key"),
    )


def _ensure_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _required_str(value: Any, field_name: str) -> str:
    if value is None:
        raise ValueError(f"Missing required field: {field_name}")
    return str(value)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def describe(record: ChangeRecord) -> str | None:
    """Human-readable line for a recognized change; None for any other event."""
    if record.event_name == OBJECT_CREATED_PUT:
        return f"Object {record.object_key} is created in bucket {record.bucket_name}"
    if record.event_name == OBJECT_REMOVED_DELETE:
        return f"Object {record.object_key} is removed from bucket {record.bucket_name}"
    return None


def build_body(records: Iterable[ChangeRecord]) -> str:
    messages = []
    for record in records:
        message = describe(record)
        if message is not None:
            messages.append(message)
    return "\n".join(messages)
