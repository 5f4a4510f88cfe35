"""
Fluent construction of Magnet records.

Example:
    magnet = (
        MagnetBuilder()
        .display_name("My Torrent")
        .hash_type("btih")
        .hash("1234567890abcdef1234567890abcdef12345678")
        .add_tracker("udp://tracker.example.com:6969")
        .build()
    )
    print(magnet.to_uri())

No value is validated. Anything that would not survive a round trip only
shows up once the built link is serialized and parsed again.
"""

from dataclasses import replace
from typing import Iterable

from .magnet import Magnet


class MagnetBuilder:
    def __init__(self):
        self.magnet = Magnet()

    def display_name(self, name: str) -> "MagnetBuilder":
        self.magnet.display_name = name
        return self

    def hash_type(self, hash_type: str) -> "MagnetBuilder":
        self.magnet.hash_type = hash_type
        return self

    def hash(self, hash_value: str) -> "MagnetBuilder":
        self.magnet.hash = hash_value
        return self

    def length(self, length: int) -> "MagnetBuilder":
        self.magnet.length = length
        return self

    def source(self, source: str) -> "MagnetBuilder":
        self.magnet.source = source
        return self

    def add_tracker(self, tracker: str) -> "MagnetBuilder":
        self.magnet.trackers.append(tracker)
        return self

    def add_trackers(self, trackers: Iterable[str]) -> "MagnetBuilder":
        self.magnet.trackers.extend(trackers)
        return self

    def search_keywords(self, keywords: str) -> "MagnetBuilder":
        self.magnet.search_keywords = keywords
        return self

    def web_seed(self, web_seed: str) -> "MagnetBuilder":
        self.magnet.web_seed = web_seed
        return self

    def acceptable_source(self, source: str) -> "MagnetBuilder":
        self.magnet.acceptable_source = source
        return self

    def manifest(self, manifest: str) -> "MagnetBuilder":
        self.magnet.manifest = manifest
        return self

    def build(self) -> Magnet:
        # Later setter calls must not reach records already built
        return replace(self.magnet, trackers=list(self.magnet.trackers))
