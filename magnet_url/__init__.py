"""
magnet_url - Parse and build magnet links.

Parses magnet URIs into a Magnet record (hash, display name, size,
trackers and alternate sources) and writes records back out in a
canonical order, so that parsing the output yields an equal record.
"""

from .builder import MagnetBuilder
from .config import Config
from .errors import InvalidMagnetError, MagnetError, NotAMagnetURL
from .magnet import Magnet
from .parser import parse
from .serializer import to_string

__version__ = "0.1.0"
__all__ = [
    "Magnet",
    "MagnetBuilder",
    "MagnetError",
    "NotAMagnetURL",
    "InvalidMagnetError",
    "parse",
    "to_string",
    "Config",
]
