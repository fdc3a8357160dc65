"""
Tests for the ConfStore configuration file loader.
"""

import json
import os
import re
import shutil
import tempfile
import unittest
from pathlib import Path

import yaml

from ConfStore import Loader, LoaderError, Store, load_config


class TestLoader(unittest.TestCase):
    """Test cases for Loader.load()."""

    def setUp(self):
        """Set up a directory of configuration files."""
        self.temp_dir = tempfile.mkdtemp()
        self.path = Path(self.temp_dir)

        with open(self.path / "database.yml", "w") as f:
            yaml.dump({"type": "postgresql", "pool": {"enabled": True, "size": 5}}, f)

        with open(self.path / "app.json", "w") as f:
            json.dump({"name": "demo", "hosts": ["a", "b"]}, f)

        with open(self.path / "cache.yaml", "w") as f:
            f.write("enabled: false\nttl: 60\n")

        # Files the default filter must ignore
        with open(self.path / ".hidden.yml", "w") as f:
            f.write("secret: true\n")
        with open(self.path / "notes.txt", "w") as f:
            f.write("not a config file\n")

        os.makedirs(self.path / "nested")
        with open(self.path / "nested" / "deep.yml", "w") as f:
            f.write("value: 1\n")

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def test_load(self):
        """Each visible YAML/JSON file becomes a top-level section."""
        store = Loader().load(self.temp_dir)

        self.assertIsInstance(store, Store)
        self.assertEqual(sorted(store.get_all()), ["app", "cache", "database"])
        self.assertEqual(store.get("database.type"), "postgresql")
        self.assertEqual(store.get("database.pool.size"), 5)
        self.assertEqual(store.get("app.hosts"), ["a", "b"])
        self.assertTrue(store.enabled("database.pool"))
        self.assertTrue(store.disabled("cache"))

    def test_load_path_object(self):
        """Directories can be given as Path objects."""
        store = load_config(self.path)
        self.assertEqual(store.get("app.name"), "demo")

    def test_ignores_hidden_files_and_subdirectories(self):
        """Hidden files, other extensions and subdirectories are skipped."""
        store = Loader().load(self.temp_dir)

        self.assertFalse(store.has(".hidden"))
        self.assertFalse(store.has("notes"))
        self.assertFalse(store.has("nested"))
        self.assertFalse(store.has("deep"))

    def test_filter_pattern(self):
        """A pattern selects files and its first group names the key."""
        store = Loader(file_filter=r'^(.*)\.json$').load(self.temp_dir)
        self.assertEqual(list(store.get_all()), ["app"])

        store = Loader(file_filter=re.compile(r'^data.*\.yml$')).load(self.temp_dir)
        self.assertEqual(list(store.get_all()), ["database.yml"])

    def test_filter_pattern_unanchored(self):
        """A pattern may match anywhere in the file name."""
        store = Loader(file_filter=r'\.json$').load(self.temp_dir)
        self.assertEqual(list(store.get_all()), [".json"])
        self.assertEqual(store.get_all()[".json"]["name"], "demo")

        store = Loader(file_filter=r'(cache)\.yaml').load(self.temp_dir)
        self.assertEqual(list(store.get_all()), ["cache"])

    def test_filter_pattern_unmatched_group(self):
        """A group that takes no part in the match falls back to the whole match."""
        store = Loader(file_filter=r'^(x)?app\.json$').load(self.temp_dir)

        self.assertEqual(list(store.get_all()), ["app.json"])
        self.assertEqual(store.get_all()["app.json"]["hosts"], ["a", "b"])

    def test_filter_callable(self):
        """A callable filter returns the key, or a falsy value to skip."""
        def only_yaml(name):
            if name.endswith(".yml") and not name.startswith("."):
                return name[:-len(".yml")].upper()
            return None

        store = Loader(file_filter=only_yaml).load(self.temp_dir)
        self.assertEqual(list(store.get_all()), ["DATABASE"])

    def test_mapper(self):
        """The mapper renames keys and receives the file path."""
        seen = []

        def mapper(name, path):
            seen.append(path)
            return f"conf_{name}"

        store = Loader(mapper=mapper).load(self.temp_dir)

        self.assertEqual(sorted(store.get_all()), ["conf_app", "conf_cache", "conf_database"])
        self.assertIn(str(self.path / "app.json"), seen)

    def test_resolve(self):
        """The resolver transforms the content of each file."""
        store = Loader(resolve=lambda content: {"content": content}).load(self.temp_dir)

        self.assertEqual(store.get("cache.content.ttl"), 60)
        self.assertEqual(store.get("app.content.name"), "demo")

    def test_missing_directory(self):
        """Loading a missing directory raises LoaderError."""
        with self.assertRaises(LoaderError):
            Loader().load(self.path / "missing")

    def test_invalid_file(self):
        """Unparseable files raise LoaderError with the original cause."""
        with open(self.path / "broken.json", "w") as f:
            f.write("{not json")

        with self.assertRaises(LoaderError) as ctx:
            Loader().load(self.temp_dir)

        self.assertIn("broken.json", ctx.exception.message)
        self.assertIsInstance(ctx.exception.cause, ValueError)

    def test_unsupported_format(self):
        """Files selected by a custom filter must still be YAML or JSON."""
        with self.assertRaises(LoaderError):
            Loader(file_filter=r'^(notes)\.txt$').load(self.temp_dir)

    def test_load_logs_summary(self):
        """The loader reports how many files it loaded."""
        with self.assertLogs("ConfStore.loader.loader", level="DEBUG") as logs:
            Loader().load(self.temp_dir)

        self.assertIn("Loaded app.json as 'app'", "\n".join(logs.output))
        self.assertTrue(logs.output[-1].endswith(f"Loaded 3 configuration files from {self.path}"))

    def test_empty_directory(self):
        """An empty directory yields an empty store."""
        empty = self.path / "nested" / "empty"
        os.makedirs(empty)

        self.assertEqual(Loader().load(empty).get_all(), {})


if __name__ == "__main__":
    unittest.main()
