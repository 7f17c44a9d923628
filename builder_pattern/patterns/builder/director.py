from . import IBuilder

from typing import Optional

from builder_pattern.commons.log_helper import get_logger
from builder_pattern.exceptions import DirectorStateError, InvalidTypeError

_LOG = get_logger(__name__)


class Director:
    """
    Runs the construction steps of an attached builder in a particular
    sequence. A client may as well drive a builder directly, the director
    only captures commonly used sequences.
    """

    def __init__(self, builder: Optional[IBuilder] = None):
        self._builder = None
        if builder is not None:
            self.builder = builder

    @property
    def builder(self) -> Optional[IBuilder]:
        """
        Returns the currently attached builder.
        :returns:Optional[IBuilder]
        """
        return self._builder

    @builder.setter
    def builder(self, other: IBuilder):
        """
        Attaches a builder, which has to provide the IBuilder steps.
        :other:IBuilder
        :returns:None
        """
        if not isinstance(other, IBuilder):
            raise InvalidTypeError(
                f'A builder must provide the IBuilder construction steps, '
                f'`{other.__class__.__name__}` does not.'
            )
        self._builder = other

    def build_minimal_viable_product(self):
        _LOG.debug('Building a minimal viable product')
        self._attached().build_part_a()

    def build_full_featured_product(self):
        _LOG.debug('Building a full featured product')
        builder = self._attached()
        builder.build_part_a()
        builder.build_part_b()
        builder.build_part_c()

    def _attached(self) -> IBuilder:
        if self._builder is None:
            raise DirectorStateError('No builder has been attached to '
                                     'the director.')
        return self._builder
