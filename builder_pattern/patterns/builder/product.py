from typing import Tuple

PARTS_PREFIX = 'Product parts: '
PARTS_SEPARATOR = ', '
NO_PARTS = '(none)'


class Product:
    """
    A passive container of the parts assembled by a builder. Parts are
    kept in insertion order and are never removed individually.
    """

    def __init__(self):
        self._parts = []

    @property
    def parts(self) -> Tuple[str, ...]:
        """
        Returns a snapshot of the assembled parts, in insertion order.
        :returns:Tuple[str, ...]
        """
        return tuple(self._parts)

    def add_part(self, identifier: str):
        self._parts.append(identifier)

    def list_parts(self) -> str:
        """
        Renders the parts as a comma separated listing. An empty product
        renders as `Product parts: (none)`.
        :returns:str
        """
        listing = PARTS_SEPARATOR.join(self._parts) or NO_PARTS
        return PARTS_PREFIX + listing

    def __len__(self):
        return len(self._parts)

    def __repr__(self):
        return f'{self.__class__.__name__}(parts={self._parts!r})'
