"""A helicopter arcade game with a rocket-battery charging station."""

__version__ = "0.1.0"