"""A small terminal text editor in the spirit of kilo."""

from .constants import KILO_VERSION as __version__

__all__ = ["__version__"]
