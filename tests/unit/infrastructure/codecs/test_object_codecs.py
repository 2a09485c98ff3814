import pytest

from typedcache.infrastructure.codecs.object_codecs import ArchivableCodec, PickleCodec


class Token:
    def __init__(self, value: str):
        self.value = value

    def to_archive(self) -> bytes:
        return self.value.encode("ascii")

    @classmethod
    def from_archive(cls, data: bytes) -> "Token":
        return cls(data.decode("ascii"))


def test_pickle_codec_round_trip():
    codec = PickleCodec()
    data = codec.encode({"set": {1, 2}, "tuple": (1, 2)})
    assert codec.decode(data) == {"set": {1, 2}, "tuple": (1, 2)}


def test_pickle_codec_rejects_unpicklable():
    with pytest.raises(Exception):
        PickleCodec().encode(lambda: None)


def test_pickle_codec_rejects_garbage():
    with pytest.raises(Exception):
        PickleCodec().decode(b"\x80\x05garbage")


def test_archivable_codec_round_trip():
    codec = ArchivableCodec(Token)
    assert codec.encode(Token("abc")) == b"abc"
    assert codec.decode(b"abc").value == "abc"


def test_archivable_codec_refuses_other_types():
    with pytest.raises(TypeError):
        ArchivableCodec(Token).encode("abc")


def test_archivable_codec_propagates_decode_errors():
    with pytest.raises(UnicodeDecodeError):
        ArchivableCodec(Token).decode(b"\xff")
