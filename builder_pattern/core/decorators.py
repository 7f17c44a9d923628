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
import sys
from functools import wraps

from click import BadParameter

from builder_pattern.exceptions import BuilderBaseError
from builder_pattern.commons.log_helper import get_logger, get_user_logger
from builder_pattern.core.constants import OK_RETURN_CODE, FAILED_RETURN_CODE

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


def describe_error(error: Exception) -> str:
    """
    Renders an error for the console. Usage and builder errors are
    expected, anything else is reported as unexpected.
    :type error: Exception
    """
    name = error.__class__.__name__
    if isinstance(error, BadParameter):
        return f'{name} {error.message}'
    if isinstance(error, BuilderBaseError):
        return f'{name} occurred: {error}'
    return f'An unexpected error occurred: {name} {error}'


def return_code_manager(func):
    """
    Turns the outcome of a command into the process exit code: a raised
    error exits with FAILED_RETURN_CODE, a returned non-zero code exits
    with that code.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return_code = func(*args, **kwargs)
        except Exception as e:
            USER_LOG.error(describe_error(e))
            _LOG.error('Command failed', exc_info=True)
            sys.exit(FAILED_RETURN_CODE)
        if return_code not in (None, OK_RETURN_CODE):
            sys.exit(return_code)
        return return_code
    return wrapper
