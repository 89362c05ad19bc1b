"""Outbound publish adapters.

The handler only sees the `Publisher` protocol; which transport sits behind
it is decided by whoever builds the adapter.
"""

from __future__ import annotations

import uuid
from typing import Any, Protocol

import boto3

from .config import ConfigurationError


class Publisher(Protocol):
    def publish(self, topic_arn: str, message: str) -> dict[str, Any]:
        ...


class SnsPublisher:
    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def for_region(cls, region: str) -> "SnsPublisher":
        """Build an SNS client for `region` using the default credential chain."""
        if region not in _known_sns_regions():
            raise ConfigurationError(f"Unknown AWS region for SNS: {region!r}")
        return cls(boto3.client("sns", region_name=region))

    def publish(self, topic_arn: str, message: str) -> dict[str, Any]:
        return self._client.publish(TopicArn=topic_arn, Message=message)


class ConsolePublisher:
    """Prints instead of publishing; for local dry runs."""

    def publish(self, topic_arn: str, message: str) -> dict[str, Any]:
        message_id = f"console-{uuid.uuid4()}"
        print("[SNS]")
        print(f"topic={topic_arn}")
        print(f"message={message}")
        return {"MessageId": message_id}


def _known_sns_regions() -> set[str]:
    session = boto3.session.Session()
    regions: set[str] = set()
    for partition in session.get_available_partitions():
        regions.update(session.get_available_regions("sns", partition_name=partition))
    return regions
