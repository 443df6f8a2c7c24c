import pytest

from sharelink.core.errors import InvalidInputError, MissingInputError
from sharelink.models.link import ContactInviteLink, GroupLink, LinkKind, link_for_identity
from sharelink.services import wire


def test_contact_blob_layout():
    """Field numbers and ordering stay wire-compatible."""
    record = link_for_identity(bytes.fromhex("01020304"), bytes.fromhex("aabbcc"))
    assert wire.serialize(record, include_kind=False).hex() == "120b0a03aabbcc120401020304"
    assert wire.serialize(record).hex() == "0801120b0a03aabbcc120401020304"


def test_display_name_is_serialized(contact_link):
    data = wire.serialize(contact_link)
    assert b"Alice" in data


def test_roundtrip_contact(contact_link):
    assert wire.deserialize(wire.serialize(contact_link)) == contact_link


def test_roundtrip_group(group_link):
    decoded = wire.deserialize(wire.serialize(group_link))
    assert isinstance(decoded, GroupLink)
    assert decoded == group_link


def test_kind_override():
    """A blob without kind can be read as the kind given by the caller."""
    record = link_for_identity(b"pk", b"seed")
    data = wire.serialize(record, include_kind=False)
    decoded = wire.deserialize(data, kind=LinkKind.CONTACT_INVITE_V1)
    assert isinstance(decoded, ContactInviteLink)
    assert decoded.contact.account_public_key == b"pk"


def test_missing_kind_is_missing_input():
    with pytest.raises(MissingInputError):
        wire.deserialize(b"")


def test_group_blob_without_group():
    decoded = wire.deserialize(bytes.fromhex("08021a00"))
    assert isinstance(decoded, GroupLink)
    assert decoded.group_info.group is None


@pytest.mark.parametrize("blob", [
    "0805",                # kind out of range
    "08021a040a022007",    # group type out of range
    "12050102",            # truncated sub-message
    "ff",                  # truncated tag
])
def test_malformed_blobs(blob):
    with pytest.raises(InvalidInputError):
        wire.deserialize(bytes.fromhex(blob))
