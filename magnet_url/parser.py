"""
Magnet link parsing.

Splits a magnet URI into its parameters and maps the recognised keys onto a
Magnet record. Parsing is lenient by default: the only hard failure is a
missing 'magnet:?' prefix. Unknown keys, fragments without '=', malformed
exact topics and non-numeric sizes are skipped so that as much as possible
is recovered from links produced by other tools.

Strict parsing (strict=True, or MAGNET_URL_STRICT_PARSING=true) raises
InvalidMagnetError for the malformations that lenient parsing skips.
Unknown keys are accepted in both modes.
"""

from typing import Optional, Tuple

from .config import Config
from .errors import InvalidMagnetError, NotAMagnetURL
from .logger import logger
from .magnet import MAGNET_PREFIX, Magnet


URN_PREFIX = "urn:"
MAX_LENGTH = 2 ** 64 - 1

# Singular text parameters and the attribute each one sets
TEXT_PARAMS = {
    "dn": "display_name",
    "kt": "search_keywords",
    "ws": "web_seed",
    "xs": "source",
    "as": "acceptable_source",
    "mt": "manifest",
}


def split_exact_topic(value: str) -> Optional[Tuple[str, str]]:
    """
    Split an 'xt' value of the form 'urn:<hash_type>:<hash>'.

    The hash type ends at the first ':' after 'urn:', so hashes that
    contain colons themselves (e.g. 'urn:tree:tiger:<hash>') keep them.
    Returns None when the value does not have that shape.
    """
    if not value.startswith(URN_PREFIX):
        return None
    hash_type, sep, hash_value = value[len(URN_PREFIX):].partition(":")
    if not sep:
        return None
    return hash_type, hash_value


def parse_length(value: str) -> Optional[int]:
    """Parse an 'xl' value as an unsigned 64-bit integer, or return None."""
    digits = value[1:] if value.startswith("+") else value
    if not digits or not all("0" <= c <= "9" for c in digits):
        return None
    length = int(digits)
    if length > MAX_LENGTH:
        return None
    return length


def parse(magnet_uri: str, strict: Optional[bool] = None) -> Magnet:
    """
    Parse a magnet URI into a Magnet.

    Args:
        magnet_uri: The magnet link, e.g. 'magnet:?xt=urn:btih:...&dn=...'
        strict: Raise on malformed parameters instead of skipping them.
            Defaults to Config.STRICT_PARSING.

    Returns:
        Magnet with every recognised parameter filled in. Repeated 'tr'
        parameters accumulate in order; any other repeated key keeps its
        last value.

    Raises:
        NotAMagnetURL: If the string does not start with 'magnet:?'
        InvalidMagnetError: In strict mode, for a malformed parameter
    """
    if not isinstance(magnet_uri, str) or not magnet_uri.startswith(MAGNET_PREFIX):
        raise NotAMagnetURL()

    if strict is None:
        strict = Config.STRICT_PARSING

    magnet = Magnet()

    for param in magnet_uri[len(MAGNET_PREFIX):].split("&"):
        key, sep, value = param.partition("=")
        if not sep:
            # Empty fragments come from '&&', a trailing '&' or an empty query
            if param and strict:
                raise InvalidMagnetError(f"Parameter without value: {param!r}")
            if param:
                logger.debug(f"Ignoring parameter without value: {param!r}")
            continue

        if key in TEXT_PARAMS:
            setattr(magnet, TEXT_PARAMS[key], value)
        elif key == "xt":
            topic = split_exact_topic(value)
            if topic is None:
                if strict:
                    raise InvalidMagnetError(f"Malformed exact topic: {value!r}")
                logger.debug(f"Ignoring malformed exact topic: {value!r}")
                continue
            magnet.hash_type, magnet.hash = topic
        elif key == "xl":
            length = parse_length(value)
            if length is None:
                if strict:
                    raise InvalidMagnetError(f"Invalid exact length: {value!r}")
                logger.debug(f"Ignoring invalid exact length: {value!r}")
                continue
            magnet.length = length
        elif key == "tr":
            magnet.trackers.append(value)
        else:
            logger.debug(f"Ignoring unknown parameter: {key!r}")

    return magnet
