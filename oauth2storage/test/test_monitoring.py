import logging

from mock import Mock

from oauth2storage.test import unittest
from oauth2storage.monitoring import CommandLogger, to_level


class ToLevelTestCase(unittest.TestCase):
    def test_to_level(self):
        self.assertEqual(to_level("debug"), logging.DEBUG)
        self.assertEqual(to_level("INFO"), logging.INFO)
        self.assertEqual(to_level(logging.WARNING), logging.WARNING)

    def test_to_level_unknown(self):
        with self.assertRaises(ValueError):
            to_level("chatty")


class CommandLoggerTestCase(unittest.TestCase):
    def setUp(self):
        self.log_mock = Mock(spec=logging.Logger)
        self.event = Mock(command_name="find", request_id=1,
                          connection_id=("localhost", 27017),
                          duration_micros=120, failure={"errmsg": "boom"})

    def test_started_and_succeeded(self):
        listener = CommandLogger("info", log=self.log_mock)

        listener.started(self.event)
        listener.succeeded(self.event)

        self.assertEqual(self.log_mock.log.call_count, 2)
        for call in self.log_mock.log.call_args_list:
            self.assertEqual(call[0][0], logging.INFO)
            self.assertIn("find", call[0])

    def test_failed(self):
        listener = CommandLogger(log=self.log_mock)

        listener.failed(self.event)

        self.log_mock.warning.assert_called_once()
        self.assertFalse(self.log_mock.log.called)
