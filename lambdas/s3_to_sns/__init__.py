"""Lambda that turns S3 object change notifications into one SNS message."""

from .config import AdapterConfig, ConfigurationError, load_config
from .main import NotificationAdapter, lambda_handler
from .publisher import ConsolePublisher, Publisher, SnsPublisher
from .records import ChangeRecord, build_body, describe, parse_records

__all__ = [
    "AdapterConfig",
    "ChangeRecord",
    "ConfigurationError",
    "ConsolePublisher",
    "NotificationAdapter",
    "Publisher",
    "SnsPublisher",
    "build_body",
    "describe",
    "lambda_handler",
    "load_config",
    "parse_records",
]
