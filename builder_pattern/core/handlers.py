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
from functools import partial

import click

from builder_pattern import __version__
from builder_pattern.commons.log_helper import get_logger, get_user_logger
from builder_pattern.core.constants import (DEMO_ACTION, BUILD_ACTION,
                                            VARIANTS, MINIMAL_VARIANT,
                                            PART_LETTERS, OK_RETURN_CODE,
                                            BASIC_PRODUCT_TITLE,
                                            FULL_PRODUCT_TITLE,
                                            CUSTOM_PRODUCT_TITLE)
from builder_pattern.core.decorators import return_code_manager
from builder_pattern.core.helper import (verbose_option, apply_parts,
                                         validate_incompatible_options)
from builder_pattern.patterns import ConcreteBuilder, Director

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


@click.group(name='builder-demo')
@return_code_manager
@click.version_option(version=__version__)
def builder_demo():
    """Builder creational pattern demonstration"""


@builder_demo.command(name=DEMO_ACTION)
@return_code_manager
@verbose_option
def demo():
    """
    Builds a basic and a full featured product through the director, then
    a custom one by driving the builder directly
    """
    director = Director()
    builder = ConcreteBuilder()
    director.builder = builder

    click.echo(BASIC_PRODUCT_TITLE)
    director.build_minimal_viable_product()
    click.echo(builder.get_product().list_parts())
    click.echo()

    click.echo(FULL_PRODUCT_TITLE)
    director.build_full_featured_product()
    click.echo(builder.get_product().list_parts())
    click.echo()

    # the builder does not need a director
    click.echo(CUSTOM_PRODUCT_TITLE)
    builder.build_part_a()
    builder.build_part_c()
    click.echo(builder.get_product().list_parts())
    return OK_RETURN_CODE


# no default= on --variant, a defaulted value would conflict with every --part
@builder_demo.command(name=BUILD_ACTION)
@return_code_manager
@click.option('--variant', '-V',
              type=click.Choice(VARIANTS, case_sensitive=False),
              callback=partial(validate_incompatible_options,
                               incompatible_options=['part']),
              help='Product variant assembled by the director. '
                   'Default value: full')
@click.option('--part', '-p', multiple=True,
              type=click.Choice(PART_LETTERS, case_sensitive=False),
              callback=partial(validate_incompatible_options,
                               incompatible_options=['variant']),
              help='Part to build directly on the builder, bypassing the '
                   'director. Multiple values allowed, the order is kept')
@verbose_option
def build(variant, part):
    """Builds a single product and prints its parts"""
    builder = ConcreteBuilder()
    if part:
        _LOG.debug(f'Building parts {part} without a director')
        apply_parts(builder, part)
    else:
        director = Director(builder)
        if variant and variant.lower() == MINIMAL_VARIANT:
            director.build_minimal_viable_product()
        else:
            # full is the default variant
            director.build_full_featured_product()
    click.echo(builder.get_product().list_parts())
    return OK_RETURN_CODE
