import os
import unittest
from unittest import mock

from config import Settings


def _settings(**env):
    with mock.patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


class TestSettings(unittest.TestCase):
    def test_default_port(self):
        self.assertEqual(_settings().server_port, 3000)

    def test_port_fallback(self):
        self.assertEqual(_settings(PORT="8080").server_port, 8080)

    def test_server_port_takes_precedence(self):
        self.assertEqual(_settings(SERVER_PORT="4000", PORT="8080").server_port, 4000)

    def test_empty_server_port_falls_back_to_port(self):
        self.assertEqual(_settings(SERVER_PORT="", PORT="8080").server_port, 8080)

    def test_empty_ports_fall_back_to_default(self):
        self.assertEqual(_settings(SERVER_PORT="", PORT="").server_port, 3000)

    def test_cors_disabled_by_default(self):
        self.assertEqual(_settings().cors_origin_list, [])

    def test_cors_lists_are_split(self):
        s = _settings(CORS_ORIGINS="http://a.test, http://b.test", CORS_METHODS="get,post")
        self.assertEqual(s.cors_origin_list, ["http://a.test", "http://b.test"])
        self.assertEqual(s.cors_method_list, ["GET", "POST"])


if __name__ == "__main__":
    unittest.main()
