"""
Primitive codec tests.

Checks the fixed-width big-endian encodings, length prefixes, presence-coded
asset identifiers and the reader that mirrors them.
"""

import pytest

from waves_client.codec import BinaryReader, BinaryWriter, b58decode, b58encode
from waves_client.runtime.errors import DecodingError, EncodingError, ErrorCode


@pytest.mark.unit
class TestBinaryWriter:
    """Encoding of individual primitives."""

    def test_long_is_big_endian_twos_complement(self):
        w = BinaryWriter()
        w.long(1)
        w.long(-1)
        assert w.to_bytes() == b"\x00" * 7 + b"\x01" + b"\xff" * 8

    def test_long_rejects_out_of_range(self):
        w = BinaryWriter()
        with pytest.raises(EncodingError):
            w.long(1 << 63)
        assert len(w) == 0

    def test_long_rejects_bool(self):
        with pytest.raises(EncodingError):
            BinaryWriter().long(True)

    def test_short_is_big_endian(self):
        w = BinaryWriter()
        w.short(0x0102)
        assert w.to_bytes() == b"\x01\x02"

    def test_u8_range(self):
        w = BinaryWriter()
        w.u8(255)
        assert w.to_bytes() == b"\xff"
        with pytest.raises(EncodingError):
            w.u8(256)

    def test_string_utf8_prefix_counts_bytes_not_chars(self):
        w = BinaryWriter()
        w.string_utf8("hé")
        assert w.to_bytes() == b"\x00\x03h\xc3\xa9"

    def test_string_ascii_rejects_non_ascii(self):
        with pytest.raises(EncodingError):
            BinaryWriter().string_ascii("hé")

    def test_field_too_long_raises_before_writing(self):
        w = BinaryWriter()
        with pytest.raises(EncodingError) as exc_info:
            w.len_prefixed_bytes(b"x" * 32768, "payload")
        assert exc_info.value.code == ErrorCode.FIELD_TOO_LONG
        assert len(w) == 0

    def test_max_length_is_accepted(self):
        w = BinaryWriter()
        w.len_prefixed_bytes(b"x" * 32767)
        assert w.to_bytes()[:2] == b"\x7f\xff"
        assert len(w) == 32769

    def test_optional_asset_absent(self):
        w = BinaryWriter()
        w.optional_asset(None)
        w.optional_asset("")
        assert w.to_bytes() == b"\x00\x00"

    def test_optional_asset_present(self, asset_id, asset_id_bytes):
        w = BinaryWriter()
        w.optional_asset(asset_id)
        assert w.to_bytes() == b"\x01" + asset_id_bytes

    def test_optional_asset_wrong_width(self):
        with pytest.raises(EncodingError):
            BinaryWriter().optional_asset(b58encode(b"\x01" * 31))

    def test_recipient_address_is_raw(self, address, address_bytes):
        w = BinaryWriter()
        w.recipient(address)
        assert w.to_bytes() == address_bytes

    def test_recipient_alias(self):
        w = BinaryWriter()
        w.recipient("alias:T:bob")
        assert w.to_bytes() == b"\x02T\x00\x03bob"


@pytest.mark.unit
class TestBinaryReader:
    """Reader mirrors the writer."""

    def test_reads_back_primitives(self, asset_id, address):
        w = BinaryWriter()
        w.u8(7)
        w.bool(True)
        w.short(300)
        w.long(-42)
        w.string_utf8("key")
        w.string_ascii("name")
        w.optional_asset(None)
        w.optional_asset(asset_id)
        w.recipient(address)
        w.recipient("alias:W:carol")

        r = BinaryReader(w.to_bytes())
        assert r.u8() == 7
        assert r.bool() is True
        assert r.short() == 300
        assert r.long() == -42
        assert r.string_utf8() == "key"
        assert r.string_ascii() == "name"
        assert r.optional_asset() is None
        assert r.optional_asset() == asset_id
        assert r.recipient() == address
        assert r.recipient() == "alias:W:carol"
        assert r.eof

    def test_overrun_raises_decoding_error(self):
        with pytest.raises(DecodingError):
            BinaryReader(b"\x00\x01").long()

    def test_invalid_presence_flag(self):
        with pytest.raises(DecodingError):
            BinaryReader(b"\x05").optional_asset()


@pytest.mark.unit
class TestBase58:
    """Identifier text codec."""

    def test_roundtrip(self, asset_id_bytes):
        assert b58decode(b58encode(asset_id_bytes)) == asset_id_bytes

    def test_invalid_alphabet(self):
        with pytest.raises(DecodingError) as exc_info:
            b58decode("0OIl")
        assert exc_info.value.code == ErrorCode.INVALID_IDENTIFIER

    def test_non_string(self):
        with pytest.raises(DecodingError):
            b58decode(12345)


@pytest.mark.unit
class TestInt32:
    """32-bit lengths used to embed orders."""

    def test_big_endian(self):
        w = BinaryWriter()
        w.int32(203)
        assert w.to_bytes() == b"\x00\x00\x00\xcb"
        assert BinaryReader(w.to_bytes()).int32() == 203

    def test_negative_rejected(self):
        with pytest.raises(EncodingError):
            BinaryWriter().int32(-1)
