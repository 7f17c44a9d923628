from . import AbstractBuilder, Product

PART_A = 'PartA1'
PART_B = 'PartB1'
PART_C = 'PartC1'


class ConcreteBuilder(AbstractBuilder):
    """
    A concrete Builder class, which assembles a Product out of
    fixed `PartA1`, `PartB1` and `PartC1` parts. All steps work
    on the same product instance until it is retrieved.
    """

    def _create_product(self) -> Product:
        return Product()

    def build_part_a(self):
        self._add(PART_A)

    def build_part_b(self):
        self._add(PART_B)

    def build_part_c(self):
        self._add(PART_C)
