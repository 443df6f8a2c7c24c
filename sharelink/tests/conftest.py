import pytest
from fastapi.testclient import TestClient

from sharelink.main import app
from sharelink.models.link import GroupDescriptor, GroupType, link_for_group, link_for_identity


@pytest.fixture
def client():
    """Creates a test client for the link API."""
    return TestClient(app)


@pytest.fixture
def contact_link():
    """A shareable contact invite."""
    return link_for_identity(bytes.fromhex("01020304"), bytes.fromhex("aabbcc"), "Alice")


@pytest.fixture
def group_descriptor():
    return GroupDescriptor(
        public_key=b"\x00\x01group-pk",
        secret=b"group-secret",
        secret_signature=b"group-secret-sig",
        group_type=GroupType.MULTI_MEMBER,
        signing_public_key=b"group-sign-pub",
    )


@pytest.fixture
def group_link(group_descriptor):
    """A shareable multi-member group invite."""
    return link_for_group(group_descriptor, "Book Club")
