from abc import ABC, abstractmethod

BUILD_STEPS = ('build_part_a', 'build_part_b', 'build_part_c')


class IBuilder(ABC):
    """
    The capability set of a builder. Any class providing callable
    `build_part_a`, `build_part_b` and `build_part_c` is regarded as
    an IBuilder, whether or not it inherits from it.
    """

    @abstractmethod
    def reset(self):
        ...

    @abstractmethod
    def build_part_a(self):
        ...

    @abstractmethod
    def build_part_b(self):
        ...

    @abstractmethod
    def build_part_c(self):
        ...

    @abstractmethod
    def get_product(self):
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is not IBuilder:
            return NotImplemented
        implemented = all(
            callable(getattr(subclass, step, None)) for step in BUILD_STEPS
        )
        return True if implemented else NotImplemented
