"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
# Two logger trees are configured at import time. `builder_pattern` holds
# internal diagnostics and reaches the console only in debug mode.
# `user-builder_pattern` holds messages for the person running the CLI.
# BUILDER_DEBUG=true starts both at DEBUG, BUILDER_LOGS=<dir> moves the
# log folder out of the home directory.
import logging
import logging.config
import os
import sys
from datetime import date
from pathlib import Path

LOG_FOLDER_NAME = '.builder_pattern_logs'
LOG_FILE_NAME = '%Y-%m-%d-builder_pattern.log'
LOG_NAME = 'builder_pattern'
USER_LOG_NAME = f'user-{LOG_NAME}'
CONSOLE_HANDLER = 'console_handler'
FILE_HANDLER = 'file_handler'

FILE_FORMAT = ('%(asctime)s [%(levelname)s] '
               '%(name)s:%(lineno)d:%(funcName)s %(message)s')
CONSOLE_FORMAT = '[%(levelname)s] %(message)s'

ANSI_RESET = '\x1b[0m'
LEVEL_COLOURS = {
    logging.DEBUG: '\x1b[0;37m',
    logging.WARNING: '\x1b[0;33m',
    logging.ERROR: '\x1b[0;31m',
    logging.CRITICAL: '\x1b[0;31m'
}


def debug_requested() -> bool:
    return os.environ.get('BUILDER_DEBUG', '').lower() == 'true'


LOG_LEVEL = logging.DEBUG if debug_requested() else logging.INFO


class ColouredConsoleFormatter(logging.Formatter):
    """Wraps console records into an ANSI colour picked by level."""

    def __init__(self):
        super().__init__(CONSOLE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        colour = LEVEL_COLOURS.get(record.levelno)
        return f'{colour}{text}{ANSI_RESET}' if colour else text


def get_project_log_file_path() -> str:
    """
    Resolves today's log file, creating the log folder when missing.
    :returns:str
    """
    base = os.environ.get('BUILDER_LOGS') or Path.home()
    folder = os.path.join(base, LOG_FOLDER_NAME)
    try:
        os.makedirs(folder, exist_ok=True)
    except OSError as e:
        print(f'Error while creating logs path: {e}', file=sys.stderr)
    return os.path.join(folder, date.today().strftime(LOG_FILE_NAME))


def _logging_config(file_path: str, level: int) -> dict:
    internal_handlers = [FILE_HANDLER]
    if level == logging.DEBUG:
        internal_handlers.append(CONSOLE_HANDLER)
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'file': {'format': FILE_FORMAT},
            'console': {'()': ColouredConsoleFormatter}
        },
        'handlers': {
            # opened on the first record only
            FILE_HANDLER: {
                'class': 'logging.FileHandler',
                'formatter': 'file',
                'filename': file_path,
                'delay': True
            },
            # stdout carries product listings
            CONSOLE_HANDLER: {
                'class': 'logging.StreamHandler',
                'formatter': 'console',
                'stream': 'ext://sys.stderr'
            }
        },
        'loggers': {
            USER_LOG_NAME: {
                'level': level,
                'handlers': [CONSOLE_HANDLER, FILE_HANDLER]
            },
            LOG_NAME: {
                'level': level,
                'handlers': internal_handlers
            }
        }
    }


logging.config.dictConfig(_logging_config(get_project_log_file_path(),
                                          LOG_LEVEL))

user_logger = logging.getLogger(USER_LOG_NAME)
package_logger = logging.getLogger(LOG_NAME)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger of the internal `builder_pattern` tree. Module names
    of this package are used as they are, any other name is nested under
    the tree root.
    :type name: str
    """
    if name == LOG_NAME or name.startswith(LOG_NAME + '.'):
        return logging.getLogger(name)
    return package_logger.getChild(name)


def get_user_logger() -> logging.Logger:
    """
    Returns the `user-builder_pattern` logger, shown on the console.
    """
    return user_logger


def set_debug_log_level():
    """
    Switches both trees to DEBUG and mirrors the internal tree onto
    the console.
    """
    console_handler = next(
        handler for handler in user_logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.FileHandler)
    )
    names = [name for name in logging.root.manager.loggerDict
             if name.startswith((LOG_NAME, USER_LOG_NAME))]
    for logger in map(logging.getLogger, names):
        if not logger.isEnabledFor(logging.DEBUG):
            logger.setLevel(logging.DEBUG)
    if console_handler not in package_logger.handlers:
        package_logger.addHandler(console_handler)
