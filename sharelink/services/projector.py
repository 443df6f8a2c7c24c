from dataclasses import dataclass, field
from typing import Dict

from sharelink.core.errors import InvalidInputError
from sharelink.models.link import (
    ContactInfo,
    ContactInviteLink,
    GroupDescriptor,
    GroupInfo,
    GroupLink,
    LinkKind,
    LinkRecord,
)


@dataclass(frozen=True)
class Projection:
    """Per-destination views of one validated link.

    `machine` goes into the web form's binary blob, `human` into its query
    string, and `qr` into the internal form unchanged.
    """

    machine: LinkRecord
    qr: LinkRecord
    human: Dict[str, str] = field(default_factory=dict)


def project(record: LinkRecord) -> Projection:
    if record.kind == LinkKind.CONTACT_INVITE_V1:
        contact = record.contact
        # the display name travels as readable text, not inside the blob
        machine = ContactInviteLink(
            contact=ContactInfo(
                account_public_key=contact.account_public_key,
                public_rendezvous_seed=contact.public_rendezvous_seed,
            )
        )
        return Projection(machine=machine, qr=record, human=_human_params(contact.display_name))

    if record.kind == LinkKind.GROUP_V1:
        group = record.group_info.group
        machine = GroupLink(
            group_info=GroupInfo(
                group=GroupDescriptor(
                    public_key=group.public_key,
                    secret=group.secret,
                    secret_signature=group.secret_signature,
                    group_type=group.group_type,
                    signing_public_key=group.signing_public_key,
                )
            )
        )
        return Projection(machine=machine, qr=record, human=_human_params(record.group_info.display_name))

    raise InvalidInputError(f"unsupported link kind {record.kind!r}")


def _human_params(display_name: str) -> Dict[str, str]:
    human = {}
    if display_name:
        human["name"] = display_name
    return human
