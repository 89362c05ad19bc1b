from __future__ import annotations

import os
import unittest
from unittest import mock

from s3_to_sns.config import AdapterConfig, ConfigurationError, load_config


class LoadConfigTests(unittest.TestCase):
    def test_load_config_reads_required_values(self) -> None:
        config = load_config(
            {"Region": "eu-north-1", "TopicARN": "arn:aws:sns:::target-topic"}
        )

        self.assertEqual(
            config,
            AdapterConfig(
                region="eu-north-1",
                topic_arn="arn:aws:sns:::target-topic",
                serialize_to_json=False,
            ),
        )

    @mock.patch.dict(
        os.environ,
        {"Region": "eu-north-1", "TopicARN": "arn:aws:sns:::target-topic"},
        clear=True,
    )
    def test_load_config_defaults_to_process_environment(self) -> None:
        config = load_config()

        self.assertEqual(config.region, "eu-north-1")
        self.assertEqual(config.topic_arn, "arn:aws:sns:::target-topic")

    def test_load_config_requires_region(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            load_config({"TopicARN": "arn:aws:sns:::target-topic"})

        self.assertIn("Region", str(ctx.exception))

    def test_load_config_requires_topic_arn(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            load_config({"Region": "eu-north-1"})

        self.assertIn("TopicARN", str(ctx.exception))

    def test_load_config_keeps_values_verbatim(self) -> None:
        config = load_config({"Region": "eu-north-1", "TopicARN": " arn:aws:sns:eu-north-1:1:t "})

        self.assertEqual(config.topic_arn, " arn:aws:sns:eu-north-1:1:t ")

    def test_load_config_accepts_blank_topic_arn(self) -> None:
        config = load_config({"Region": "eu-north-1", "TopicARN": ""})

        self.assertEqual(config.topic_arn, "")

    def test_load_config_does_not_validate_topic_format(self) -> None:
        config = load_config({"Region": "eu-north-1", "TopicARN": "not-an-arn"})

        self.assertEqual(config.topic_arn, "not-an-arn")

    def test_serialize_to_json_flag(self) -> None:
        base = {"Region": "eu-north-1", "TopicARN": "arn:aws:sns:::target-topic"}
        cases = {
            "true": True,
            "TRUE": True,
            "True": True,
            " true ": False,
            "yes": False,
            "1": False,
            "on": False,
            "false": False,
            "0": False,
            "maybe": False,
            "": False,
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                config = load_config(base | {"SerializeToJSON": raw})
                self.assertIs(config.serialize_to_json, expected)


if __name__ == "__main__":
    unittest.main()
