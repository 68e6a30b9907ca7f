import logging
import os

from unittest.mock import patch

from fileformat.lib.environment import EVBool, EVInt, EVLog, LogLevel, logger

from .. import TestBase


class TestEnvironment(TestBase):

    def test_bool_settings(self):
        for value, expected in [
            ('1', True),
            ('yes', True),
            ('on', True),
            ('0', False),
            ('off', False),
            ('False', False),
            ('', False),
        ]:
            with patch.dict(os.environ, {'FILEFORMAT_TEST_SETTING': value}):
                self.assertEqual(EVBool('TEST_SETTING').value, expected, msg=value)

    def test_bool_setting_unset(self):
        with patch.dict(os.environ, clear=True):
            self.assertFalse(EVBool('TEST_SETTING').value)

    def test_int_settings(self):
        with patch.dict(os.environ, {'FILEFORMAT_TEST_SETTING': '0x10000'}):
            self.assertEqual(EVInt('TEST_SETTING').value, 0x10000)
        with patch.dict(os.environ, {'FILEFORMAT_TEST_SETTING': 'many'}):
            self.assertEqual(EVInt('TEST_SETTING').value, 0)

    def test_log_settings(self):
        with patch.dict(os.environ, {'FILEFORMAT_TEST_SETTING': 'debug'}):
            self.assertEqual(EVLog('TEST_SETTING').value, LogLevel.DEBUG)
        with patch.dict(os.environ, {'FILEFORMAT_TEST_SETTING': '1'}):
            self.assertEqual(EVLog('TEST_SETTING').value, LogLevel.INFO)
        with patch.dict(os.environ, {'FILEFORMAT_TEST_SETTING': 'loud'}):
            self.assertIsNone(EVLog('TEST_SETTING').value)

    def test_verbosity_roundtrip(self):
        for verbosity in (-1, 0, 1, 2):
            self.assertEqual(LogLevel.FromVerbosity(verbosity).verbosity, verbosity)
        self.assertEqual(LogLevel.FromVerbosity(7), LogLevel.DEBUG)

    def test_logger_has_single_handler(self):
        log = logger('fileformat.test.environment')
        self.assertIs(logger('fileformat.test.environment'), log)
        self.assertEqual(len(log.handlers), 1)
        self.assertFalse(log.propagate)
        self.assertIsInstance(log.handlers[0], logging.StreamHandler)
