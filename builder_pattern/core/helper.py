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
from functools import wraps

import click

from builder_pattern.commons.log_helper import get_logger, \
    set_debug_log_level
from builder_pattern.exceptions import InvalidValueError
from builder_pattern.patterns import IBuilder

_LOG = get_logger(__name__)


def _debug_callback(ctx, param, value):
    if value:
        set_debug_log_level()
        _LOG.debug('The logs level was set to DEBUG')


def verbose_option(func):
    @click.option('--verbose', '-v', is_flag=True,
                  callback=_debug_callback, expose_value=False,
                  is_eager=True, help="Enable logging verbose mode.")
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def validate_incompatible_options(ctx, param, value, incompatible_options):
    """
    Option callback rejecting `value` when any of `incompatible_options`
    has already been given on the command line.
    """
    given = [option for option in incompatible_options
             if ctx.params.get(option)]
    if value and given:
        raise click.BadParameter(
            f'cannot be combined with {", ".join(given)}',
            ctx=ctx, param=param
        )
    return value


def apply_parts(builder: IBuilder, letters):
    """
    Invokes the construction step of the given builder for each part
    letter, preserving the order.
    :type builder: IBuilder
    :type letters: Iterable[str]
    """
    for letter in letters:
        step = getattr(builder, f'build_part_{letter.lower()}', None)
        if step is None:
            raise InvalidValueError(f'Unknown part `{letter}`')
        step()
