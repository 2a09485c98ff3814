"""Main entry point when executing typedcache as a package.

This allows running the package using python -m typedcache.
"""

from typedcache.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
