"""Infrastructure Layer: Contains concrete implementations and adapters.

Provides the disk-backed value store, the in-memory LRU cache, object codecs,
configuration loading, logging setup and the console display used by the CLI.
"""
