"""Bridges custom objects and the encoded-blob storage variant.

Codec failures are surfaced, never defaulted: dropping a custom object on
write or treating corrupt bytes as absence would silently lose state.
"""

import logging
from typing import Any

from typedcache.domain.exceptions import ArchiveDecodeError, ArchiveEncodeError
from typedcache.domain.interfaces.codec import ObjectCodec
from typedcache.domain.models.common import CacheKey, EncodedBlob

logger = logging.getLogger(__name__)


def archive(key: CacheKey, value: Any, codec: ObjectCodec) -> EncodedBlob:
    """Encodes value with codec.

    Raises:
        ArchiveEncodeError: If the codec fails or does not return bytes.
    """
    codec_name = type(codec).__name__
    try:
        data = codec.encode(value)
    except Exception as e:
        logger.error(f"{codec_name} failed to archive {type(value).__name__} for key '{key}': {e}", exc_info=True)
        raise ArchiveEncodeError(
            f"Cannot archive {type(value).__name__} for key '{key}': {e}", key=key, cause=e
        ) from e
    if not isinstance(data, (bytes, bytearray)):
        raise ArchiveEncodeError(
            f"{codec_name} returned {type(data).__name__} for key '{key}', expected bytes", key=key
        )
    return EncodedBlob(bytes(data))


def unarchive(key: CacheKey, data: bytes, codec: ObjectCodec) -> Any:
    """Decodes bytes previously produced by archive.

    Raises:
        ArchiveDecodeError: If the stored bytes cannot be decoded.
    """
    try:
        return codec.decode(data)
    except Exception as e:
        logger.error(f"{type(codec).__name__} failed to unarchive {len(data)} bytes for key '{key}': {e}", exc_info=True)
        raise ArchiveDecodeError(
            f"Stored data for key '{key}' is corrupt or unreadable: {e}", key=key, cause=e
        ) from e
