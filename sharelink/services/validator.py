import logging
from typing import Optional

from sharelink.core.errors import InvalidInputError, MissingInputError
from sharelink.models.link import GroupType, LinkKind, LinkRecord

logger = logging.getLogger(__name__)


def validate(record: Optional[LinkRecord]) -> None:
    """Raise unless `record` holds every field needed to share it."""
    if record is None:
        raise MissingInputError("link is empty")

    kind = getattr(record, "kind", LinkKind.UNKNOWN)
    if kind == LinkKind.UNKNOWN:
        raise MissingInputError("link kind is missing")

    if kind == LinkKind.CONTACT_INVITE_V1:
        contact = record.contact
        if not contact.account_public_key:
            raise MissingInputError("contact link is missing the account public key")
        if not contact.public_rendezvous_seed:
            raise MissingInputError("contact link is missing the public rendezvous seed")
        return

    if kind == LinkKind.GROUP_V1:
        group = record.group_info.group
        if group is None:
            raise MissingInputError("group link is missing the group")
        if group.group_type != GroupType.MULTI_MEMBER:
            logger.info("Refusing to share a %s group", group.group_type.name)
            raise InvalidInputError(f"can't share a {group.group_type.name} group type")
        return

    raise InvalidInputError(f"unsupported link kind {kind!r}")


def is_contact(record: Optional[LinkRecord]) -> bool:
    return _is_valid_kind(record, LinkKind.CONTACT_INVITE_V1)


def is_group(record: Optional[LinkRecord]) -> bool:
    return _is_valid_kind(record, LinkKind.GROUP_V1)


def _is_valid_kind(record: Optional[LinkRecord], kind: LinkKind) -> bool:
    if getattr(record, "kind", None) != kind:
        return False
    try:
        validate(record)
    except (MissingInputError, InvalidInputError):
        return False
    return True
