import logging
import re
from urllib.parse import parse_qsl, urlencode

from sharelink.core.errors import InvalidInputError
from sharelink.models.link import LinkKind, LinkRecord
from sharelink.services import wire
from sharelink.services.projector import project
from sharelink.utils.encoding import BASE58, has_prefix

logger = logging.getLogger(__name__)

# Everything after '#' stays in the browser, web servers never see the payload.
WEB_PREFIX = "https://berty.tech/id#"

KIND_TAGS = {
    LinkKind.CONTACT_INVITE_V1: "contact",
    LinkKind.GROUP_V1: "group",
}
TAG_KINDS = {tag: kind for kind, tag in KIND_TAGS.items()}

# a '%' must start a two-digit hex escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode(record: LinkRecord) -> str:
    """Build `https://berty.tech/id#<kind>/<base58 blob>[/<query>]` for a validated record."""
    projection = project(record)
    blob = BASE58.encode(wire.serialize(projection.machine, include_kind=False))
    path = f"{KIND_TAGS[record.kind]}/{blob}"
    if projection.human:
        path += "/" + urlencode(sorted(projection.human.items()))
    return WEB_PREFIX + path


def decode(uri: str) -> LinkRecord:
    if not has_prefix(uri, WEB_PREFIX):
        raise InvalidInputError("not a web link")

    fragment = uri.partition("#")[2]
    if not fragment:
        raise InvalidInputError("web link has an empty fragment")

    parts = fragment.split("/")
    if len(parts) < 2:
        raise InvalidInputError("URI should have at least 2 parts")

    kind = TAG_KINDS.get(parts[0])
    if kind is None:
        logger.info("Unknown web link kind %r", parts[0][:50])
        raise InvalidInputError(f"unknown link kind {parts[0]!r}")

    if not parts[1]:
        raise InvalidInputError("web link has an empty blob")

    record = wire.deserialize(BASE58.decode(parts[1]), kind=kind)
    human = _parse_human(parts[2:])
    return _merge_human(record, human)


def _parse_human(parts) -> dict:
    human = {}
    encoded = "/".join(parts)
    if not encoded:
        return human
    if _BAD_ESCAPE.search(encoded):
        raise InvalidInputError("malformed link metadata: invalid URL escape")
    try:
        pairs = parse_qsl(encoded, keep_blank_values=True, errors="strict")
    except ValueError as exc:
        raise InvalidInputError(f"malformed link metadata: {exc}") from exc
    for key, value in pairs:
        human.setdefault(key, value)
    return human


def _merge_human(record: LinkRecord, human: dict) -> LinkRecord:
    # a name already present in the blob wins over the readable one
    name = human.get("name", "")
    if not name:
        return record

    if record.kind == LinkKind.CONTACT_INVITE_V1 and not record.contact.display_name:
        contact = record.contact.model_copy(update={"display_name": name})
        return record.model_copy(update={"contact": contact})
    if record.kind == LinkKind.GROUP_V1 and not record.group_info.display_name:
        group_info = record.group_info.model_copy(update={"display_name": name})
        return record.model_copy(update={"group_info": group_info})
    return record
