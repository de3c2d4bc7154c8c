# ownergrep/__init__.py
"""
ownergrep - search the files a CODEOWNERS owner is responsible for

Maps CODEOWNERS entries to directory trees, filters them with ignore
patterns and runs a case-insensitive substring search over the rest.
"""

import os

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(os.path.dirname(__file__)), "VERSION")
try:
    with open(_version_file) as f:
        __version__ = f.read().strip()
except (FileNotFoundError, IOError):
    __version__ = "1.0.0"

__license__ = "MIT"
