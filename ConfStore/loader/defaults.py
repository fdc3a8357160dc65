"""
Default settings for the ConfStore file loader.

These values are used when a Loader is created without options. They can be
overridden per loader through its ``file_filter``, ``mapper`` and ``resolve``
arguments.
"""

import re
from typing import Dict

# Matches visible YAML and JSON files; group 1 (the name without extension)
# becomes the settings key
DEFAULT_FILTER = re.compile(r'^([^.].*)\.(ya?ml|json)$')

# File extensions the loader knows how to parse, mapped to their format
SUPPORTED_EXTENSIONS: Dict[str, str] = {
    '.yaml': 'yaml',
    '.yml': 'yaml',
    '.json': 'json',
}
