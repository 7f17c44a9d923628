from .product import Product
from .interface import IBuilder
from .abstract import AbstractBuilder
from .concrete import ConcreteBuilder, PART_A, PART_B, PART_C
from .director import Director
