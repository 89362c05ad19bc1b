#!/usr/bin/env python3
"""Run the S3 -> SNS notification Lambda against a saved S3 event."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

# Allow running this file directly from repository root.
ROOT = Path(__file__).resolve().parents[1]
LAMBDAS_DIR = ROOT / "lambdas"
if str(LAMBDAS_DIR) not in sys.path:
    sys.path.insert(0, str(LAMBDAS_DIR))

from s3_to_sns.config import (  # noqa: E402
    REGION_ENV,
    SERIALIZE_TO_JSON_ENV,
    TOPIC_ARN_ENV,
    ConfigurationError,
    load_config,
)
from s3_to_sns.main import NotificationAdapter  # noqa: E402
from s3_to_sns.publisher import ConsolePublisher, SnsPublisher  # noqa: E402

DEFAULT_EVENT = ROOT / "tests" / "events" / "object_created_put.json"

LOG_FORMAT = "%(levelname)s %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
log = logging.getLogger("s3_to_sns.invoke")


def _load_event(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise SystemExit(f"Event file not found: {path}")
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def _environment(args: argparse.Namespace) -> Dict[str, str]:
    env = dict(os.environ)
    if args.region:
        env[REGION_ENV] = args.region
    if args.topic_arn:
        env[TOPIC_ARN_ENV] = args.topic_arn
    if args.json_logs:
        env[SERIALIZE_TO_JSON_ENV] = "true"
    return env


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Invoke the S3 -> SNS notification handler locally.")
    parser.add_argument("--event-file", type=Path, default=DEFAULT_EVENT, help="Path to an S3 event JSON file.")
    parser.add_argument("--region", help=f"Overrides the {REGION_ENV} environment variable.")
    parser.add_argument("--topic-arn", help=f"Overrides the {TOPIC_ARN_ENV} environment variable.")
    parser.add_argument("--json-logs", action="store_true", help="Dump logged values as JSON.")
    parser.add_argument("--dry-run", action="store_true", help="Print the message instead of publishing to SNS.")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    event = _load_event(args.event_file)

    try:
        config = load_config(_environment(args))
        publisher = ConsolePublisher() if args.dry_run else SnsPublisher.for_region(config.region)
    except ConfigurationError as exc:
        raise SystemExit(str(exc)) from exc

    log.info("Invoking handler with %s", args.event_file)
    try:
        NotificationAdapter(config, publisher).handle(event, None)
    except (BotoCoreError, ClientError) as exc:
        raise SystemExit(f"Publish failed: {exc}") from exc


if __name__ == "__main__":
    main()
