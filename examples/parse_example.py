"""
Parse a magnet link and print its parts.

Usage:
    python examples/parse_example.py [magnet_uri]

Without an argument the Sintel demo link is used.
"""

import sys

from magnet_url import Magnet, NotAMagnetURL


SINTEL = (
    "magnet:?xt=urn:btih:08ada5a7a6183aae1e09d831df6748d566095a10"
    "&dn=Sintel"
    "&tr=udp%3A%2F%2Fexplodie.org%3A6969"
    "&tr=udp%3A%2F%2Ftracker.coppersurfer.tk%3A6969"
    "&tr=udp%3A%2F%2Ftracker.empire-js.us%3A1337"
    "&tr=udp%3A%2F%2Ftracker.leechers-paradise.org%3A6969"
    "&tr=udp%3A%2F%2Ftracker.opentrackr.org%3A1337"
    "&tr=wss%3A%2F%2Ftracker.btorrent.xyz"
    "&tr=wss%3A%2F%2Ftracker.fastcast.nz"
    "&tr=wss%3A%2F%2Ftracker.openwebtorrent.com"
    "&ws=https%3A%2F%2Fwebtorrent.io%2Ftorrents%2F"
    "&xs=https%3A%2F%2Fwebtorrent.io%2Ftorrents%2Fsintel.torrent"
)


def main():
    uri = sys.argv[1] if len(sys.argv) > 1 else SINTEL

    try:
        magnet = Magnet.parse(uri)
    except NotAMagnetURL as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Name:      {magnet.display_name}")
    print(f"Hash:      {magnet.hash_type}:{magnet.hash}")
    print(f"Size:      {magnet.length}")
    print(f"Web seed:  {magnet.web_seed}")
    print(f"Source:    {magnet.source}")
    print(f"Trackers:  {len(magnet.trackers)}")
    for tracker in magnet.trackers:
        print(f"  {tracker}")


if __name__ == "__main__":
    main()
