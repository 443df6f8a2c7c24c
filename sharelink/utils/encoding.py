import base64

from sharelink.core.errors import DecodeError

# Bitcoin alphabet, no 0/O/I/l so links survive being copied by hand
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# QR alphanumeric mode set (0-9, A-Z, SP $ % * + - . / :) without SP, % and +,
# which change when passed through URL encoding. 42 symbols remain.
QR_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789$*-.:/"


class BaseNCodec:
    """Big-endian byte string <-> text over an arbitrary alphabet.

    Leading zero bytes are carried as leading copies of the first alphabet
    character, so ``decode(encode(b"\\x00\\x00"))`` gives the two bytes back.
    """

    def __init__(self, alphabet: str):
        if len(alphabet) < 2:
            raise ValueError("alphabet must have at least 2 characters")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet contains duplicate characters")
        self.alphabet = alphabet
        self.base = len(alphabet)
        self._index = {ch: i for i, ch in enumerate(alphabet)}

    def __repr__(self):
        return f"BaseNCodec(base={self.base})"

    def encode(self, data: bytes) -> str:
        zeros = len(data) - len(data.lstrip(b"\x00"))
        num = int.from_bytes(data, "big")
        out = []
        while num:
            num, rem = divmod(num, self.base)
            out.append(self.alphabet[rem])
        return self.alphabet[0] * zeros + ''.join(reversed(out))

    def decode(self, text: str) -> bytes:
        zero_char = self.alphabet[0]
        zeros = len(text) - len(text.lstrip(zero_char))
        num = 0
        for pos, ch in enumerate(text):
            digit = self._index.get(ch)
            if digit is None:
                raise DecodeError(f"invalid character {ch!r} at position {pos} for base{self.base}")
            num = num * self.base + digit
        body = num.to_bytes((num.bit_length() + 7) // 8, "big")
        return b"\x00" * zeros + body


BASE58 = BaseNCodec(BASE58_ALPHABET)
QR_BASE = BaseNCodec(QR_ALPHABET)


def has_prefix(text: str, prefix: str) -> bool:
    """Case-insensitive prefix check for link schemes."""
    return text[:len(prefix)].lower() == prefix.lower()


def b64_to_bytes(value):
    """Accept standard base64 text for byte fields in JSON payloads."""
    if isinstance(value, str):
        return base64.b64decode(value, validate=True)
    return value


def bytes_to_b64(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")
