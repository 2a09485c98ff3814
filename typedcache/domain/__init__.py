"""Domain Layer: value model, error taxonomy and the ports (interfaces)
that the durable store, the memory cache and object codecs implement.
"""
