"""A small pygame arcade game about catching falling circles, with its message bus, input, state stack and unit modules."""

__version__ = "0.1.0"
__all__ = ["__version__"]