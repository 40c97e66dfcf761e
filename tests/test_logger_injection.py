"""
Unit tests for the diagnostics logger helpers.
"""

import logging
import os
import shutil
import tempfile
import unittest

from devlog.logger_injection import (
    configure_logging,
    get_logger,
    reset_logging_config,
    with_logger,
)
from devlog.logging_setup import LoggingOptions, setup_logging


@with_logger
def _injected(value, logger=None):
    return logger


class TestLoggerInjection(unittest.TestCase):

    def tearDown(self):
        reset_logging_config()

    def test_name_from_caller(self):
        logger = get_logger()
        self.assertEqual(logger.name, f"{__name__}.test_name_from_caller")

    def test_explicit_logger_returned(self):
        existing = logging.getLogger('devlog.tests.existing')
        self.assertIs(get_logger(logger=existing), existing)

    def test_with_logger_injects(self):
        logger = _injected(1)
        self.assertEqual(logger.name, f"{__name__}._injected")

    def test_with_logger_keeps_given_logger(self):
        existing = logging.getLogger('devlog.tests.given')
        self.assertIs(_injected(1, logger=existing), existing)

    def test_global_configuration(self):
        configure_logging({'log_level': logging.DEBUG})
        self.assertEqual(get_logger(func_name='configured', func_module='devlog.tests').level, logging.DEBUG)
        reset_logging_config()
        self.assertEqual(get_logger(func_name='after_reset', func_module='devlog.tests').level, logging.WARNING)

    def test_default_level_is_warning(self):
        self.assertEqual(get_logger(func_name='defaults', func_module='devlog.tests').level, logging.WARNING)


class TestSetupLogging(unittest.TestCase):

    def test_handlers_not_stacked(self):
        first = setup_logging('devlog.tests.stack', LoggingOptions(level=logging.INFO))
        second = setup_logging('devlog.tests.stack', LoggingOptions(level=logging.ERROR))
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)
        self.assertEqual(second.level, logging.ERROR)

    def test_file_added_to_existing_logger(self):
        temp_dir = tempfile.mkdtemp()
        try:
            log_path = os.path.join(temp_dir, 'diagnostics.log')
            logger = setup_logging('devlog.tests.late_file', LoggingOptions())
            self.assertEqual(len(logger.handlers), 1)

            setup_logging('devlog.tests.late_file', LoggingOptions(filePath=log_path))
            setup_logging('devlog.tests.late_file', LoggingOptions(filePath=log_path))
            file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            self.assertEqual(len(file_handlers), 1)

            logger.warning("reaches the file")
            file_handlers[0].flush()
            with open(log_path, 'r') as f:
                self.assertIn("reaches the file", f.read())
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            shutil.rmtree(temp_dir)

    def test_configure_logging_reaches_existing_logger(self):
        temp_dir = tempfile.mkdtemp()
        name = 'devlog.tests.configured_later'
        try:
            get_logger(func_name='configured_later', func_module='devlog.tests')
            configure_logging({'log_file_path': os.path.join(temp_dir, 'devlog.log')})
            logger = get_logger(func_name='configured_later', func_module='devlog.tests')
            self.assertTrue(any(isinstance(h, logging.FileHandler) for h in logger.handlers))
        finally:
            reset_logging_config()
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            shutil.rmtree(temp_dir)


if __name__ == '__main__':
    unittest.main()
