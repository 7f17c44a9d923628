from . import IBuilder, Product
from abc import abstractmethod

from builder_pattern.commons.log_helper import get_logger

_LOG = get_logger(__name__)


class AbstractBuilder(IBuilder):
    def __init__(self):
        self._product = None
        self.reset()

    @abstractmethod
    def _create_product(self) -> Product:
        """
        Meant to return a brand-new, empty product.
        """

    def reset(self):
        """
        Drops the product in progress and starts over with an empty one.
        :returns:None
        """
        self._product = self._create_product()

    def get_product(self) -> Product:
        """
        Hands the product assembled so far over to the caller and resets,
        so that the returned instance is never touched by further steps.
        :returns:Product
        """
        product = self._product
        self.reset()
        _LOG.debug(f'Product handed over: {product!r}')
        return product

    def _add(self, identifier: str):
        _LOG.debug(f'Adding part `{identifier}`')
        self._product.add_part(identifier)
