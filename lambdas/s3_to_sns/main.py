from __future__ import annotations

import logging
from typing import Any

from .config import AdapterConfig, load_config, serialize_to_json_enabled
from .formatting import JsonFormatter, PlainFormatter, formatter_for
from .publisher import Publisher, SnsPublisher
from .records import build_body, parse_records

log = logging.getLogger()
log.setLevel(logging.INFO)


def log_invocation(event: Any, ctx: Any, formatter: PlainFormatter | JsonFormatter) -> None:
    log.info("S3 event: %s", formatter.format(event))
    log.info("context: %s", formatter.format(ctx))


class NotificationAdapter:
    """Publishes one SNS message describing every recognized change in a batch."""

    def __init__(
        self,
        config: AdapterConfig,
        publisher: Publisher,
        formatter: PlainFormatter | JsonFormatter | None = None,
    ) -> None:
        self._config = config
        self._publisher = publisher
        self._formatter = formatter or formatter_for(config.serialize_to_json)

    def _dump(self, value: Any) -> str:
        return self._formatter.format(value)

    def handle(self, event: dict[str, Any], ctx: Any) -> None:
        log_invocation(event, ctx, self._formatter)
        self.publish_batch(event)

    def publish_batch(self, event: dict[str, Any]) -> None:
        records = parse_records(event)
        for record in records:
            log.info("S3 message: %s", self._dump(record))
            log.info("S3 event name: %s", record.event_name)
            log.info("S3 bucket: %s", record.bucket_name)
            log.info("S3 key: %s", record.object_key)

        body = build_body(records)
        log.info("SNS message body: %s", self._dump(body))

        log.info("region: %s", self._config.region)
        topic_arn = self._config.topic_arn
        log.info("topic ARN: %s", topic_arn)

        request = {"TopicArn": topic_arn, "Message": body}
        log.info("SNS publish request: %s", self._dump(request))
        try:
            result = self._publisher.publish(topic_arn, body)
        except Exception:
            log.exception("SNS publish to %s failed", topic_arn)
            raise
        log.info("SNS publish result: %s", self._dump(result))


def lambda_handler(event, ctx):
    formatter = formatter_for(serialize_to_json_enabled())
    log_invocation(event, ctx, formatter)

    config = load_config()
    adapter = NotificationAdapter(config, SnsPublisher.for_region(config.region), formatter)
    adapter.publish_batch(event)
    return None
