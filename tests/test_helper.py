import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from builder_pattern.commons.log_helper import (
    get_logger, get_user_logger, get_project_log_file_path, debug_requested,
    _logging_config, LOG_NAME, USER_LOG_NAME, LOG_FOLDER_NAME,
    CONSOLE_HANDLER, FILE_HANDLER
)
from builder_pattern.core.decorators import describe_error
from builder_pattern.core.helper import apply_parts
from builder_pattern.exceptions import InvalidValueError, DirectorStateError
from builder_pattern.patterns import ConcreteBuilder


class ApplyPartsTest(unittest.TestCase):

    def setUp(self) -> None:
        self.builder = ConcreteBuilder()

    def test_ordered_parts(self):
        apply_parts(self.builder, ['B', 'a', 'b'])
        self.assertEqual(self.builder.get_product().parts,
                         ('PartB1', 'PartA1', 'PartB1'))

    def test_unknown_part(self):
        """
        Tests that an unknown part letter raises InvalidValueError,
        keeping the parts built before it.
        """
        with self.assertRaises(InvalidValueError):
            apply_parts(self.builder, ['a', 'x'])
        self.assertEqual(self.builder.get_product().parts, ('PartA1',))


class DescribeErrorTest(unittest.TestCase):

    def test_builder_error(self):
        message = describe_error(DirectorStateError('no builder'))
        self.assertEqual(message, 'DirectorStateError occurred: no builder')

    def test_unexpected_error(self):
        message = describe_error(KeyError('x'))
        self.assertTrue(message.startswith('An unexpected error occurred'))


class LoggerTest(unittest.TestCase):

    def test_nested_logger(self):
        logger = get_logger('patterns')
        self.assertEqual(logger.name, f'{LOG_NAME}.patterns')
        self.assertIsInstance(logger, logging.Logger)

    def test_module_logger(self):
        """
        Tests that module names of the package are not nested twice.
        """
        name = 'builder_pattern.core.handlers'
        self.assertEqual(get_logger(name).name, name)

    def test_user_logger(self):
        self.assertIs(get_user_logger(), logging.getLogger(USER_LOG_NAME))


class LoggingConfigurationTest(unittest.TestCase):

    def test_logs_folder_override(self):
        """
        Tests that BUILDER_LOGS moves the log file into the given folder,
        creating the logs sub-folder.
        """
        with tempfile.TemporaryDirectory() as folder:
            with patch.dict(os.environ, {'BUILDER_LOGS': folder}):
                log_file = get_project_log_file_path()
            expected = os.path.join(folder, LOG_FOLDER_NAME)
            self.assertEqual(os.path.dirname(log_file), expected)
            self.assertTrue(os.path.isdir(expected))
            self.assertTrue(log_file.endswith('-builder_pattern.log'))

    def test_debug_requested(self):
        with patch.dict(os.environ, {'BUILDER_DEBUG': 'True'}):
            self.assertTrue(debug_requested())
        with patch.dict(os.environ, {'BUILDER_DEBUG': 'no'}):
            self.assertFalse(debug_requested())

    def test_debug_configuration(self):
        """
        Tests that the internal tree reaches the console only when
        configured at DEBUG level.
        """
        debug = _logging_config('builder.log', logging.DEBUG)
        info = _logging_config('builder.log', logging.INFO)
        self.assertEqual(debug['loggers'][LOG_NAME]['handlers'],
                         [FILE_HANDLER, CONSOLE_HANDLER])
        self.assertEqual(info['loggers'][LOG_NAME]['handlers'],
                         [FILE_HANDLER])
        self.assertTrue(debug['handlers'][FILE_HANDLER]['delay'])
        self.assertEqual(info['handlers'][CONSOLE_HANDLER]['stream'],
                         'ext://sys.stderr')


if __name__ == '__main__':
    unittest.main()
