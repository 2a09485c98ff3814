"""Custom-object codecs."""

from typedcache.infrastructure.codecs.object_codecs import ArchivableCodec, PickleCodec

__all__ = ["ArchivableCodec", "PickleCodec"]
