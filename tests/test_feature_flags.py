"""
Tests for the ConfStore enable/disable flags.
"""

import unittest

from ConfStore import Store


class TestEnable(unittest.TestCase):
    """Test cases for Store.enable() and Store.disable()."""

    def test_enable_new_key(self):
        """Enabling a missing key sets it to True."""
        data = {}
        Store(data).enable("foo")

        self.assertIn("foo", data)
        self.assertIs(data["foo"], True)

    def test_enable_section(self):
        """Enabling a section sets its 'enabled' field and keeps the rest."""
        data = {"foo": {"bar": False}}
        Store(data).enable("foo")

        self.assertEqual(data, {"foo": {"bar": False, "enabled": True}})

    def test_disable_new_key(self):
        """Disabling a missing key sets it to False."""
        data = {}
        Store(data).disable("foo")

        self.assertIn("foo", data)
        self.assertIs(data["foo"], False)

    def test_disable_section(self):
        """Disabling a section sets its 'enabled' field to False."""
        data = {"foo": {"bar": False}}
        Store(data).disable("foo")

        self.assertEqual(data, {"foo": {"bar": False, "enabled": False}})

    def test_enable_nested_scalar(self):
        """A scalar setting is replaced by the flag itself."""
        data = {"search": {"fuzzy": "yes"}}
        Store(data).enable("search.fuzzy")

        self.assertEqual(data, {"search": {"fuzzy": True}})

    def test_toggle(self):
        """Flags can be toggled back and forth, with chaining."""
        store = Store({"cache": {"size": 10}})

        self.assertIs(store.disable("cache"), store)
        self.assertTrue(store.disabled("cache"))

        store.enable("cache").enable("debug")
        self.assertTrue(store.enabled("cache"))
        self.assertTrue(store.enabled("debug"))
        self.assertEqual(store.get("cache.size"), 10)

    def test_enable_then_enabled(self):
        """enable() then enabled(), disable() then disabled() always hold."""
        store = Store({"a": 0, "b": "text", "c": [1]})

        for key in ("a", "b", "c", "d", "e.f"):
            store.enable(key)
            self.assertTrue(store.enabled(key), key)
            store.disable(key)
            self.assertTrue(store.disabled(key), key)


class TestEnabled(unittest.TestCase):
    """Test cases for Store.enabled() and Store.disabled()."""

    def test_enabled_true(self):
        """Truthy values and sections not flagged off are enabled."""
        store = Store({
            "a": 25,
            "b": True,
            "c": {"d": "foo"},
            "e": {"enabled": True},
            "f": {},
        })

        for key in ("a", "b", "c", "e", "f"):
            self.assertTrue(store.enabled(key), key)
            self.assertFalse(store.disabled(key), key)

    def test_enabled_false(self):
        """Falsy values, sections flagged off and missing keys are disabled."""
        store = Store({
            "a": 0,
            "b": False,
            "c": {"enabled": False},
            "d": {"enabled": 0, "other": True},
            "e": None,
        })

        for key in ("a", "b", "c", "d", "e", "missing", "a.b"):
            self.assertFalse(store.enabled(key), key)
            self.assertTrue(store.disabled(key), key)

    def test_enabled_nested(self):
        """Flags are resolved with dot notation."""
        store = Store({"search": {"fuzzy": {"enabled": True, "threshold": 70}}})

        self.assertTrue(store.enabled("search.fuzzy"))
        self.assertTrue(store.enabled("search.fuzzy.threshold"))
        self.assertFalse(store.enabled("search.exact"))


if __name__ == "__main__":
    unittest.main()
