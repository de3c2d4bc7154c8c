# ownergrep/__main__.py
"""Allow ``python -m ownergrep``."""

from ownergrep.main import run

if __name__ == "__main__":
    run()
