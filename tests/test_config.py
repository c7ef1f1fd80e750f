import os
import unittest
from unittest import mock

from pybreachvip import config


class TestConfig(unittest.TestCase):
    def test_defaults_without_environment(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(config.default_api_url(), "https://breach.vip/api/search")
            self.assertEqual(config.default_timeout(), 30.0)

    def test_environment_overrides(self):
        env = {
            config.API_URL_ENV: " https://example.test/api ",
            config.TIMEOUT_ENV: "4.5",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(config.default_api_url(), "https://example.test/api")
            self.assertEqual(config.default_timeout(), 4.5)

    def test_invalid_timeout(self):
        with mock.patch.dict(os.environ, {config.TIMEOUT_ENV: "soon"}, clear=True):
            with self.assertRaises(ValueError):
                config.default_timeout()

    def test_non_positive_environment_timeout(self):
        with mock.patch.dict(os.environ, {config.TIMEOUT_ENV: "-5"}, clear=True):
            with self.assertRaises(ValueError) as context:
                config.default_timeout()

        self.assertIn(config.TIMEOUT_ENV, str(context.exception))

    def test_parse_timeout(self):
        self.assertEqual(config.parse_timeout("2.5"), 2.5)
        self.assertEqual(config.parse_timeout(10), 10.0)
        for raw in ("-1", "0", "nan", "inf", "-inf", "soon", None):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    config.parse_timeout(raw)


if __name__ == "__main__":
    unittest.main()
