import logging

from sharelink.core.errors import InvalidInputError
from sharelink.models.link import LinkRecord
from sharelink.services import wire
from sharelink.services.projector import project
from sharelink.utils.encoding import QR_BASE, has_prefix

logger = logging.getLogger(__name__)

INTERNAL_PREFIX = "BERTY://"

# binary framing tag; other framings may be added later
PROTOBUF_FORMAT = "PB"


def encode(record: LinkRecord) -> str:
    """Build `BERTY://PB/<blob>`; upper-case only, so QR codes stay in alphanumeric mode."""
    blob = QR_BASE.encode(wire.serialize(project(record).qr))
    return f"{INTERNAL_PREFIX}{PROTOBUF_FORMAT}/{blob}"


def decode(uri: str) -> LinkRecord:
    if not has_prefix(uri, INTERNAL_PREFIX):
        raise InvalidInputError("not an internal link")

    parts = uri[len(INTERNAL_PREFIX):].split("/")
    if len(parts) < 2:
        raise InvalidInputError("URI should have at least 2 parts")

    if parts[0].lower() != PROTOBUF_FORMAT.lower():
        logger.info("Unsupported internal link type %r", parts[0][:50])
        raise InvalidInputError(f"unsupported link type: {parts[0]!r}")

    # the QR alphabet contains '/', so the blob may have been split
    blob = "/".join(parts[1:])
    return wire.deserialize(QR_BASE.decode(blob))
