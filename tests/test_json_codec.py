from __future__ import annotations

import pytest

from json_codec import CodecError, StdlibJsonCodec


def test_stdlib_codec_decodes_objects():
    codec = StdlibJsonCodec()
    assert codec.unmarshal(b'{"name":"Bruce","n":1,"ok":true,"x":null}') == {
        "name": "Bruce",
        "n": 1,
        "ok": True,
        "x": None,
    }


@pytest.mark.parametrize("payload", [b"", b"   ", b"text", b"{", b'{"a": Infinity}', b"\xc3\x28"])
def test_stdlib_codec_rejects_invalid_json(payload):
    with pytest.raises(CodecError):
        StdlibJsonCodec().unmarshal(payload)


def test_stdlib_codec_encodes_utf8():
    assert StdlibJsonCodec().marshal({"name": "Brücé"}) == '{"name": "Brücé"}'.encode("utf-8")


@pytest.mark.parametrize("value", [{"x": object()}, {"x": float("nan")}])
def test_stdlib_codec_rejects_unencodable_values(value):
    with pytest.raises(CodecError):
        StdlibJsonCodec().marshal(value)
