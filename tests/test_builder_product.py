import unittest

from builder_pattern.patterns import Product
from builder_pattern.patterns.builder.product import PARTS_PREFIX


class ProductTest(unittest.TestCase):

    def setUp(self) -> None:
        self.product = Product()

    def test_empty_listing(self):
        """
        Tests that a product without parts renders the explicit
        empty-state listing instead of failing.
        """
        self.assertEqual(self.product.list_parts(), 'Product parts: (none)')
        self.assertEqual(len(self.product), 0)

    def test_single_part_listing(self):
        self.product.add_part('PartA1')
        self.assertEqual(self.product.list_parts(), 'Product parts: PartA1')

    def test_insertion_order(self):
        """
        Tests that parts are listed in insertion order, comma separated,
        including repeated identifiers.
        """
        parts = ['PartC1', 'PartA1', 'PartC1', 'PartB1']
        for each in parts:
            self.product.add_part(each)
        self.assertEqual(self.product.parts, tuple(parts))
        self.assertEqual(self.product.list_parts(),
                         PARTS_PREFIX + ', '.join(parts))

    def test_parts_snapshot(self):
        """
        Tests that the exposed parts can not be used to mutate the product.
        """
        self.product.add_part('PartA1')
        parts = self.product.parts
        self.product.add_part('PartB1')
        self.assertEqual(parts, ('PartA1',))
        self.assertEqual(len(self.product), 2)


if __name__ == '__main__':
    unittest.main()
