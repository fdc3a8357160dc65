#!/usr/bin/env python3
"""
Basic usage example for the ConfStore module.
"""
import json
import sys

from ConfStore import Store, Loader


def print_json(data):
    """Print data as formatted JSON."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def main():
    """Main function."""
    # Create a store from a dictionary
    store = Store({
        "database": {"type": "sqlite", "hosts": ["db1"]},
        "cache": {"size": 100},
    })

    print("Reading settings...")
    print(store.get("database.type"))
    print(store.get("database.port", 5432))

    print("\nWriting and toggling settings...")
    store.set("logging.level", "debug").enable("cache").disable("search.fuzzy")
    print_json(store.get_all())

    print("\nMerging new settings...")
    store.merge({"database": {"hosts": ["db2"], "port": 5433}})
    print_json(store.get("database"))

    # Load a directory of YAML/JSON files if one was given
    if len(sys.argv) > 1:
        print(f"\nLoading {sys.argv[1]}...")
        loaded = Loader().load(sys.argv[1])
        print_json(loaded.get_all())


if __name__ == '__main__':
    main()
