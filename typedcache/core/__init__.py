"""Core Application Layer: the typed cache facade.

Orchestrates reads and writes across the durable store and the memory cache
through the domain interfaces, normalizing values on the way in and
coercing them on the way out.
"""
