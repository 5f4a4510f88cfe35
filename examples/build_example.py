"""
Build a magnet link from scratch.

Note that this link won't actually download anything; the hash is made up.
"""

from magnet_url import Magnet, MagnetBuilder


def main():
    magnet = (
        MagnetBuilder()
        .display_name("hello_world")
        .hash_type("sha1")
        .hash("2aae6c35c94fcfb415dbe95f408b9ce91ee846ed")
        .length(1234567890)
        .add_tracker("https://example.com/")
        .search_keywords("cool+stuff")
        .build()
    )

    uri = magnet.to_uri()
    print(uri)

    # Parsing the output gives back an equal record
    assert Magnet.parse(uri) == magnet


if __name__ == "__main__":
    main()
