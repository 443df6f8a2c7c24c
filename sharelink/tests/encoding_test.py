import pytest

from sharelink.core.errors import DecodeError, InvalidInputError
from sharelink.utils.encoding import (
    BASE58,
    BASE58_ALPHABET,
    QR_ALPHABET,
    QR_BASE,
    BaseNCodec,
    has_prefix,
)


def test_alphabets():
    """Alphabet sizes and the QR-safe character set."""
    assert BASE58.base == 58
    assert QR_BASE.base == 42
    assert QR_ALPHABET == QR_ALPHABET.upper()
    for ch in " %+":
        assert ch not in QR_ALPHABET
    for ch in "0OIl":
        assert ch not in BASE58_ALPHABET


@pytest.mark.parametrize("data,expected", [
    (b"", ""),
    (b"\x00", "1"),
    (b"\x00\x00\x01", "112"),
    (b"hello world", "StV1DL6CwTryKyV"),
])
def test_base58_known_vectors(data, expected):
    assert BASE58.encode(data) == expected
    assert BASE58.decode(expected) == data


@pytest.mark.parametrize("data,expected", [
    (b"", ""),
    (b"\x00", "A"),
    (b"\x01", "B"),
    (b"\x29", "/"),
    (b"\x2a", "BA"),
])
def test_qr_base_known_vectors(data, expected):
    assert QR_BASE.encode(data) == expected
    assert QR_BASE.decode(expected) == data


@pytest.mark.parametrize("codec", [BASE58, QR_BASE])
@pytest.mark.parametrize("data", [
    b"\x00\x00\x00",
    b"\x00\xff",
    bytes(range(256)),
    b"\xff" * 40,
])
def test_leading_zero_bytes_survive(codec, data):
    assert codec.decode(codec.encode(data)) == data


def test_qr_output_stays_in_alphabet():
    encoded = QR_BASE.encode(bytes(range(256)))
    assert set(encoded) <= set(QR_ALPHABET)


@pytest.mark.parametrize("codec,text", [
    (BASE58, "abc0"),
    (BASE58, "O"),
    (QR_BASE, "abc"),
    (QR_BASE, "AB+C"),
    (QR_BASE, "A B"),
])
def test_decode_rejects_foreign_characters(codec, text):
    with pytest.raises(DecodeError):
        codec.decode(text)


def test_decode_error_is_invalid_input():
    with pytest.raises(InvalidInputError, match="position 2"):
        BASE58.decode("11l")


def test_alphabet_must_be_usable():
    with pytest.raises(ValueError):
        BaseNCodec("A")
    with pytest.raises(ValueError):
        BaseNCodec("ABCA")


def test_has_prefix_ignores_case():
    assert has_prefix("berty://pb/ABC", "BERTY://")
    assert has_prefix("HTTPS://BERTY.TECH/ID#contact", "https://berty.tech/id#")
    assert not has_prefix("BERTY:/", "BERTY://")
