"""
Binary serialization of link records.

Records are written as protocol buffers so the bytes stay interchangeable with
other clients of the same schema:

    message Group      { bytes public_key = 1; bytes secret = 2; bytes secret_sig = 3;
                         GroupType group_type = 4; bytes sign_pub = 5; }
    message BertyID    { bytes public_rendezvous_seed = 1; bytes account_pk = 2;
                         string display_name = 3; }
    message BertyGroup { Group group = 1; string display_name = 2; }
    message BertyLink  { Kind kind = 1; BertyID berty_id = 2; BertyGroup berty_group = 3; }

The message classes are built from a descriptor at import time, no protoc step.
"""
import logging
from typing import Optional

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import DecodeError as ProtoDecodeError

from sharelink.core.errors import InvalidInputError, MissingInputError
from sharelink.models.link import (
    ContactInfo,
    ContactInviteLink,
    GroupDescriptor,
    GroupInfo,
    GroupLink,
    GroupType,
    LinkKind,
    LinkRecord,
)

logger = logging.getLogger(__name__)

_PACKAGE = "sharelink.v1"
_Field = descriptor_pb2.FieldDescriptorProto


def _add_field(message, name, number, field_type, type_name=None):
    field = message.field.add(name=name, number=number, type=field_type, label=_Field.LABEL_OPTIONAL)
    if type_name:
        field.type_name = f".{_PACKAGE}.{type_name}"


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    proto = descriptor_pb2.FileDescriptorProto(name="sharelink/v1/link.proto", package=_PACKAGE, syntax="proto3")

    group_type = proto.enum_type.add(name="GroupType")
    for member in GroupType:
        group_type.value.add(name=f"GroupType{member.name.title().replace('_', '')}", number=int(member))

    group = proto.message_type.add(name="Group")
    _add_field(group, "public_key", 1, _Field.TYPE_BYTES)
    _add_field(group, "secret", 2, _Field.TYPE_BYTES)
    _add_field(group, "secret_sig", 3, _Field.TYPE_BYTES)
    _add_field(group, "group_type", 4, _Field.TYPE_ENUM, "GroupType")
    _add_field(group, "sign_pub", 5, _Field.TYPE_BYTES)

    berty_id = proto.message_type.add(name="BertyID")
    _add_field(berty_id, "public_rendezvous_seed", 1, _Field.TYPE_BYTES)
    _add_field(berty_id, "account_pk", 2, _Field.TYPE_BYTES)
    _add_field(berty_id, "display_name", 3, _Field.TYPE_STRING)

    berty_group = proto.message_type.add(name="BertyGroup")
    _add_field(berty_group, "group", 1, _Field.TYPE_MESSAGE, "Group")
    _add_field(berty_group, "display_name", 2, _Field.TYPE_STRING)

    link = proto.message_type.add(name="BertyLink")
    kind = link.enum_type.add(name="Kind")
    kind.value.add(name="UnknownKind", number=int(LinkKind.UNKNOWN))
    kind.value.add(name="ContactInviteV1Kind", number=int(LinkKind.CONTACT_INVITE_V1))
    kind.value.add(name="GroupV1Kind", number=int(LinkKind.GROUP_V1))
    _add_field(link, "kind", 1, _Field.TYPE_ENUM, "BertyLink.Kind")
    _add_field(link, "berty_id", 2, _Field.TYPE_MESSAGE, "BertyID")
    _add_field(link, "berty_group", 3, _Field.TYPE_MESSAGE, "BertyGroup")
    return proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())

LinkMessage = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{_PACKAGE}.BertyLink"))


def to_message(record: LinkRecord, include_kind: bool = True):
    """Build the protobuf message for a record.

    With ``include_kind=False`` the kind field is left unset, which is how the
    web form ships its blob (the kind travels as a readable path segment).
    """
    message = LinkMessage()
    if include_kind:
        message.kind = int(record.kind)

    if record.kind == LinkKind.CONTACT_INVITE_V1:
        contact = record.contact
        message.berty_id.SetInParent()
        message.berty_id.public_rendezvous_seed = contact.public_rendezvous_seed
        message.berty_id.account_pk = contact.account_public_key
        message.berty_id.display_name = contact.display_name
    elif record.kind == LinkKind.GROUP_V1:
        info = record.group_info
        message.berty_group.SetInParent()
        if info.group is not None:
            group = message.berty_group.group
            group.SetInParent()
            group.public_key = info.group.public_key
            group.secret = info.group.secret
            group.secret_sig = info.group.secret_signature
            group.group_type = int(info.group.group_type)
            group.sign_pub = info.group.signing_public_key
        message.berty_group.display_name = info.display_name
    else:
        raise InvalidInputError(f"cannot serialize link kind {record.kind!r}")
    return message


def serialize(record: LinkRecord, include_kind: bool = True) -> bytes:
    return to_message(record, include_kind=include_kind).SerializeToString(deterministic=True)


def parse_message(data: bytes):
    message = LinkMessage()
    try:
        message.ParseFromString(data)
    except (ProtoDecodeError, UnicodeDecodeError) as exc:
        logger.info("Rejected link blob of %d bytes: %s", len(data), exc)
        raise InvalidInputError(f"malformed link blob: {exc}") from exc
    return message


def _group_type(value: int) -> GroupType:
    try:
        return GroupType(value)
    except ValueError as exc:
        raise InvalidInputError(f"unknown group type {value}") from exc


def from_message(message, kind: Optional[int] = None) -> LinkRecord:
    """Turn a parsed message into a record; ``kind`` overrides the serialized one."""
    raw_kind = message.kind if kind is None else kind
    try:
        link_kind = LinkKind(raw_kind)
    except ValueError as exc:
        raise InvalidInputError(f"unknown link kind {raw_kind}") from exc

    if link_kind == LinkKind.CONTACT_INVITE_V1:
        berty_id = message.berty_id
        return ContactInviteLink(
            contact=ContactInfo(
                account_public_key=berty_id.account_pk,
                public_rendezvous_seed=berty_id.public_rendezvous_seed,
                display_name=berty_id.display_name,
            )
        )
    if link_kind == LinkKind.GROUP_V1:
        berty_group = message.berty_group
        group = None
        if berty_group.HasField("group"):
            group = GroupDescriptor(
                public_key=berty_group.group.public_key,
                secret=berty_group.group.secret,
                secret_signature=berty_group.group.secret_sig,
                group_type=_group_type(berty_group.group.group_type),
                signing_public_key=berty_group.group.sign_pub,
            )
        return GroupLink(group_info=GroupInfo(group=group, display_name=berty_group.display_name))
    raise MissingInputError("link kind is missing")


def deserialize(data: bytes, kind: Optional[int] = None) -> LinkRecord:
    return from_message(parse_message(data), kind=kind)
