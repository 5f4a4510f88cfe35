"""
Magnet link serialization.

Builds the canonical string form of a Magnet. Parameters are always
emitted in the same order so that equal records produce equal strings:

    xt, dn, xl, tr (each tracker), ws, xs, kt, as, mt

Values are written verbatim. Nothing is percent-encoded here; callers who
need encoding must store encoded values in the record.
"""

from typing import List

from .magnet import MAGNET_PREFIX, Magnet


def to_string(magnet: Magnet) -> str:
    parts: List[str] = [MAGNET_PREFIX]

    # The exact topic is only written when a hash is present. A missing
    # hash type still yields the degenerate 'urn::<hash>' clause.
    if magnet.hash is not None:
        parts.append(f"xt=urn:{magnet.hash_type or ''}:{magnet.hash}")

    def add_param(key, value):
        if value is not None:
            parts.append(f"&{key}={value}")

    add_param("dn", magnet.display_name)

    if magnet.length is not None:
        parts.append(f"&xl={magnet.length}")

    for tracker in magnet.trackers:
        parts.append(f"&tr={tracker}")

    add_param("ws", magnet.web_seed)
    add_param("xs", magnet.source)
    add_param("kt", magnet.search_keywords)
    add_param("as", magnet.acceptable_source)
    add_param("mt", magnet.manifest)

    return "".join(parts)
