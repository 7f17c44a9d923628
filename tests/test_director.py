import unittest

from builder_pattern.exceptions import DirectorStateError, InvalidTypeError
from builder_pattern.patterns import ConcreteBuilder, Director


class RecordingBuilder:
    """
    Provides the construction steps only, recording their invocation.
    """

    def __init__(self):
        self.calls = []

    def build_part_a(self):
        self.calls.append('a')

    def build_part_b(self):
        self.calls.append('b')

    def build_part_c(self):
        self.calls.append('c')


class DirectorTest(unittest.TestCase):

    def setUp(self) -> None:
        self.builder = ConcreteBuilder()
        self.director = Director()
        self.director.builder = self.builder

    def test_minimal_viable_product(self):
        self.director.build_minimal_viable_product()
        self.assertEqual(self.builder.get_product().parts, ('PartA1',))

    def test_full_featured_product(self):
        self.director.build_full_featured_product()
        self.assertEqual(self.builder.get_product().parts,
                         ('PartA1', 'PartB1', 'PartC1'))

    def test_consecutive_variants(self):
        """
        Tests that consecutive variants do not leak parts into each other,
        given the product is retrieved in between.
        """
        self.director.build_minimal_viable_product()
        minimal = self.builder.get_product()
        self.director.build_full_featured_product()
        full = self.builder.get_product()
        self.assertEqual(len(minimal), 1)
        self.assertEqual(len(full), 3)

    def test_step_order(self):
        builder = RecordingBuilder()
        self.director.builder = builder
        self.director.build_full_featured_product()
        self.director.build_minimal_viable_product()
        self.assertEqual(builder.calls, ['a', 'b', 'c', 'a'])

    def test_builder_replacement(self):
        other = ConcreteBuilder()
        self.director.builder = other
        self.director.build_minimal_viable_product()
        self.assertIs(self.director.builder, other)
        self.assertEqual(len(self.builder.get_product()), 0)
        self.assertEqual(len(other.get_product()), 1)

    def test_constructor_builder(self):
        director = Director(self.builder)
        self.assertIs(director.builder, self.builder)

    def test_unattached_builder(self):
        """
        Tests that building without an attached builder raises
        DirectorStateError.
        """
        director = Director()
        self.assertIsNone(director.builder)
        self.assertRaises(DirectorStateError,
                          director.build_minimal_viable_product)
        self.assertRaises(DirectorStateError,
                          director.build_full_featured_product)

    def test_invalid_builder(self):
        def assign():
            self.director.builder = object()
        self.assertRaises(InvalidTypeError, assign)
        self.assertIs(self.director.builder, self.builder)


if __name__ == '__main__':
    unittest.main()
