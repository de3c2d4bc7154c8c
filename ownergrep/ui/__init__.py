# ownergrep/ui/__init__.py
"""User interface modules for ownergrep."""
