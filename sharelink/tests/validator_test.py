import pytest

from sharelink.core.errors import InvalidInputError, MissingInputError
from sharelink.models.link import (
    ContactInviteLink,
    GroupInfo,
    GroupLink,
    GroupType,
    link_for_group,
    link_for_identity,
)
from sharelink.services.validator import is_contact, is_group, validate


def test_valid_links(contact_link, group_link):
    validate(contact_link)
    validate(group_link)


def test_contact_without_display_name_is_valid():
    validate(link_for_identity(b"pk", b"seed"))


def test_none_is_missing_input():
    with pytest.raises(MissingInputError):
        validate(None)


def test_unknown_kind_is_missing_input():
    class Blank:
        kind = 0

    with pytest.raises(MissingInputError):
        validate(Blank())


@pytest.mark.parametrize("pk,seed", [
    (b"", b"seed"),
    (b"pk", b""),
])
def test_contact_requires_keys(pk, seed):
    with pytest.raises(MissingInputError):
        validate(link_for_identity(pk, seed, "Bob"))


def test_empty_contact_is_missing_input():
    with pytest.raises(MissingInputError):
        validate(ContactInviteLink())


def test_group_requires_descriptor():
    with pytest.raises(MissingInputError):
        validate(GroupLink(group_info=GroupInfo(display_name="orphan")))


@pytest.mark.parametrize("group_type", [
    GroupType.UNDEFINED,
    GroupType.ACCOUNT,
    GroupType.CONTACT,
])
def test_only_multi_member_groups_are_shareable(group_descriptor, group_type):
    group = group_descriptor.model_copy(update={"group_type": group_type})
    with pytest.raises(InvalidInputError, match="can't share"):
        validate(link_for_group(group))


def test_kind_predicates(contact_link, group_link, group_descriptor):
    assert is_contact(contact_link)
    assert not is_group(contact_link)
    assert is_group(group_link)
    assert not is_contact(group_link)

    account_group = link_for_group(group_descriptor.model_copy(update={"group_type": GroupType.ACCOUNT}))
    assert not is_group(account_group)
    assert not is_contact(None)
