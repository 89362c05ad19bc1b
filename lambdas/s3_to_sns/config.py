from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

REGION_ENV = "Region"
TOPIC_ARN_ENV = "TopicARN"
SERIALIZE_TO_JSON_ENV = "SerializeToJSON"


class ConfigurationError(RuntimeError):
    pass


@dataclass(frozen=True)
class AdapterConfig:
    region: str
    topic_arn: str
    serialize_to_json: bool = False


def load_config(environ: Mapping[str, str] | None = None) -> AdapterConfig:
    """Resolve the publish target and logging toggle from the environment.

    Values are taken as-is; only their absence is an error.
    """
    env = os.environ if environ is None else environ
    return AdapterConfig(
        region=_required_env(env, REGION_ENV),
        topic_arn=_required_env(env, TOPIC_ARN_ENV),
        serialize_to_json=serialize_to_json_enabled(env),
    )


def serialize_to_json_enabled(environ: Mapping[str, str] | None = None) -> bool:
    # Only "true", in any case, turns it on.
    env = os.environ if environ is None else environ
    raw = env.get(SERIALIZE_TO_JSON_ENV)
    return raw is not None and raw.lower() == "true"


def _required_env(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None:
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return value
