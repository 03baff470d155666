"""A snake arcade game with a normal mode and an obstacle mode, played in a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]