from enum import IntEnum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class LinkKind(IntEnum):
    UNKNOWN = 0
    CONTACT_INVITE_V1 = 1
    GROUP_V1 = 2


class GroupType(IntEnum):
    UNDEFINED = 0
    ACCOUNT = 1
    CONTACT = 2
    MULTI_MEMBER = 3


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_public_key: bytes = b""
    public_rendezvous_seed: bytes = b""
    display_name: str = ""


class GroupDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    public_key: bytes = b""
    secret: bytes = b""
    secret_signature: bytes = b""
    group_type: GroupType = GroupType.UNDEFINED
    signing_public_key: bytes = b""


class GroupInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    group: Optional[GroupDescriptor] = None
    display_name: str = ""


class ContactInviteLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[LinkKind.CONTACT_INVITE_V1] = LinkKind.CONTACT_INVITE_V1
    contact: ContactInfo = Field(default_factory=ContactInfo)


class GroupLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[LinkKind.GROUP_V1] = LinkKind.GROUP_V1
    group_info: GroupInfo = Field(default_factory=GroupInfo)


# A link is exactly one of the variants; the sub-record always matches `kind`.
LinkRecord = Annotated[Union[ContactInviteLink, GroupLink], Field(discriminator="kind")]


def link_for_identity(account_public_key: bytes, public_rendezvous_seed: bytes, display_name: str = "") -> ContactInviteLink:
    return ContactInviteLink(
        contact=ContactInfo(
            account_public_key=account_public_key,
            public_rendezvous_seed=public_rendezvous_seed,
            display_name=display_name or "",
        )
    )


def link_for_group(group: GroupDescriptor, display_name: str = "") -> GroupLink:
    return GroupLink(group_info=GroupInfo(group=group, display_name=display_name or ""))
