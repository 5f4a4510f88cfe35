"""
Magnet link data model.

Provides the Magnet record holding every recognised magnet parameter.
Values are kept exactly as they appear in the link: percent-encoded text
stays encoded, and nothing is trimmed or normalised. Parsing lives in
parser.py and string reconstruction in serializer.py; the methods here
are shortcuts to both.
"""

from dataclasses import dataclass, field
from typing import List, Optional


MAGNET_PREFIX = "magnet:?"


@dataclass
class Magnet:
    # (dn) Display name of the content
    display_name: Optional[str] = None
    # Hash algorithm of the exact topic, e.g. "btih"
    hash_type: Optional[str] = None
    # (xt) Content hash
    hash: Optional[str] = None
    # (xl) Size of the content in bytes
    length: Optional[int] = None
    # (xs) Download source for the file or the address of a P2P source
    source: Optional[str] = None
    # (tr) Tracker URLs, in the order they were added
    trackers: List[str] = field(default_factory=list)
    # (kt) Search keywords
    search_keywords: Optional[str] = None
    # (ws) Payload served over HTTP(S)
    web_seed: Optional[str] = None
    # (as) Direct download fall-back source
    acceptable_source: Optional[str] = None
    # (mt) Link to a manifest of magnet links
    manifest: Optional[str] = None

    @classmethod
    def parse(cls, magnet_uri: str, strict: Optional[bool] = None) -> "Magnet":
        """
        Parse a magnet URI into a Magnet.

        Raises NotAMagnetURL if the string does not start with 'magnet:?'.
        See parser.parse for the handling of individual parameters.
        """
        from .parser import parse

        return parse(magnet_uri, strict=strict)

    def to_uri(self) -> str:
        """Reconstruct the magnet URI in canonical parameter order."""
        from .serializer import to_string

        return to_string(self)

    def __str__(self):
        return self.to_uri()

    def add_tracker(self, tracker: str):
        # Duplicates are kept; order is significant
        self.trackers.append(tracker)

    def remove_tracker(self, tracker: str):
        if tracker in self.trackers:
            self.trackers.remove(tracker)

    @staticmethod
    def is_valid_magnet(magnet_uri) -> bool:
        """
        Check that a magnet URI parses strictly and carries a content hash.

        Unlike Magnet.parse this never raises.
        """
        from .errors import MagnetError
        from .parser import parse

        try:
            magnet = parse(magnet_uri, strict=True)
        except MagnetError:
            return False
        return magnet.hash is not None
