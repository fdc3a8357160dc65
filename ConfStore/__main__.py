#!/usr/bin/env python3
"""
Main entry point for the ConfStore package when run as a module.

Example:
    $ python -m ConfStore show ./config
    $ python -m ConfStore get ./config database.port
    $ python -m ConfStore enabled ./config cache
"""

from ConfStore.cli.commands import main

if __name__ == "__main__":
    main()
