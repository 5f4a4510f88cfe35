import unittest

from magnet_url import Magnet, MagnetError, NotAMagnetURL, InvalidMagnetError

from sample_links import DEVUAN_URI, SINTEL_URI


class TestMagnet(unittest.TestCase):
    def test_defaults(self):
        magnet = Magnet()
        self.assertIsNone(magnet.display_name)
        self.assertIsNone(magnet.hash_type)
        self.assertIsNone(magnet.hash)
        self.assertIsNone(magnet.length)
        self.assertIsNone(magnet.source)
        self.assertEqual(magnet.trackers, [])
        self.assertIsNone(magnet.search_keywords)
        self.assertIsNone(magnet.web_seed)
        self.assertIsNone(magnet.acceptable_source)
        self.assertIsNone(magnet.manifest)

    def test_defaults_do_not_share_trackers(self):
        first = Magnet()
        first.add_tracker("udp://tracker.example.com:6969")
        self.assertEqual(Magnet().trackers, [])

    def test_parse(self):
        magnet = Magnet.parse(SINTEL_URI)
        self.assertIsInstance(magnet, Magnet)
        self.assertEqual(magnet.display_name, "Sintel")

    def test_equal_when_parsed_twice(self):
        first = Magnet.parse("magnet:?xt=urn:btih:ABC&tr=X")
        second = Magnet.parse("magnet:?xt=urn:btih:ABC&tr=X")
        self.assertIsNot(first, second)
        self.assertEqual(first, second)

    def test_equal_from_different_strings(self):
        first = Magnet.parse("magnet:?dn=x&xt=urn:btih:ABC")
        second = Magnet.parse("magnet:?xt=urn:btih:ABC&foo=bar&dn=x")
        self.assertEqual(first, second)

    def test_not_equal(self):
        self.assertNotEqual(Magnet.parse(SINTEL_URI), Magnet.parse(DEVUAN_URI))
        extra = Magnet.parse(DEVUAN_URI + "&tr=https://example.com/fake_tracker")
        self.assertNotEqual(Magnet.parse(DEVUAN_URI), extra)

    def test_tracker_order_matters_for_equality(self):
        self.assertNotEqual(Magnet(trackers=["a", "b"]), Magnet(trackers=["b", "a"]))

    def test_each_field_matters_for_equality(self):
        for name, value in [
            ("display_name", "x"),
            ("hash_type", "btih"),
            ("hash", "abc"),
            ("length", 1),
            ("source", "s"),
            ("search_keywords", "k"),
            ("web_seed", "w"),
            ("acceptable_source", "a"),
            ("manifest", "m"),
        ]:
            with self.subTest(field=name):
                self.assertNotEqual(Magnet(**{name: value}), Magnet())

    def test_add_tracker_keeps_duplicates(self):
        magnet = Magnet()
        magnet.add_tracker("a")
        magnet.add_tracker("b")
        magnet.add_tracker("a")
        self.assertEqual(magnet.trackers, ["a", "b", "a"])

    def test_remove_tracker(self):
        magnet = Magnet(trackers=["a", "b", "a"])
        magnet.remove_tracker("a")
        self.assertEqual(magnet.trackers, ["b", "a"])
        magnet.remove_tracker("missing")
        self.assertEqual(magnet.trackers, ["b", "a"])

    def test_direct_mutation(self):
        magnet = Magnet.parse("magnet:?xt=urn:btih:abc")
        magnet.display_name = "renamed"
        self.assertEqual(magnet.to_uri(), "magnet:?xt=urn:btih:abc&dn=renamed")

    def test_is_valid_magnet(self):
        self.assertTrue(Magnet.is_valid_magnet(SINTEL_URI))
        self.assertTrue(Magnet.is_valid_magnet("magnet:?xt=urn:btih:abc&foo=bar"))
        self.assertFalse(Magnet.is_valid_magnet("https://example.com"))
        self.assertFalse(Magnet.is_valid_magnet("magnet:?dn=no-hash"))
        self.assertFalse(Magnet.is_valid_magnet("magnet:?xt=urn:btih:abc&junk"))
        self.assertFalse(Magnet.is_valid_magnet(None))


class TestErrors(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(NotAMagnetURL, MagnetError))
        self.assertTrue(issubclass(InvalidMagnetError, MagnetError))

    def test_message(self):
        self.assertEqual(str(NotAMagnetURL()), "provided link is not a valid magnet URL")

    def test_raised_by_parse(self):
        with self.assertRaises(MagnetError):
            Magnet.parse("https://example.com")


if __name__ == '__main__':
    unittest.main()
