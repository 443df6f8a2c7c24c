import logging
from typing import Tuple

from sharelink.core.errors import InvalidInputError, LinkError, MissingInputError
from sharelink.models.link import LinkRecord
from sharelink.services import internal_link, web_link
from sharelink.services.validator import validate
from sharelink.utils.encoding import has_prefix

logger = logging.getLogger(__name__)


class LinkService:

    @staticmethod
    def marshal(record: LinkRecord) -> Tuple[str, str]:
        """Return the `(internal, web)` forms of a link.

        The web form drops anything that does not need to be in the blob;
        the internal form keeps every field and is meant for QR codes.
        """
        validate(record)
        internal = internal_link.encode(record)
        web = web_link.encode(record)
        logger.info("Marshalled %s link: internal=%d chars, web=%d chars", record.kind.name, len(internal), len(web))
        return internal, web

    @staticmethod
    def marshal_web(record: LinkRecord) -> str:
        validate(record)
        return web_link.encode(record)

    @staticmethod
    def marshal_internal(record: LinkRecord) -> str:
        validate(record)
        return internal_link.encode(record)

    @staticmethod
    def unmarshal(uri: str) -> LinkRecord:
        if not uri:
            raise MissingInputError("link is empty")

        # the payload may carry secrets, only its prefix and length get logged
        prefix = "unknown"
        try:
            if has_prefix(uri, internal_link.INTERNAL_PREFIX):
                prefix = internal_link.INTERNAL_PREFIX
                record = internal_link.decode(uri)
            elif has_prefix(uri, web_link.WEB_PREFIX):
                prefix = web_link.WEB_PREFIX
                record = web_link.decode(uri)
            else:
                raise InvalidInputError("unsupported link format")
        except LinkError as e:
            logger.warning(f"Failed to unmarshal {prefix} link of {len(uri)} chars due to: {e}")
            raise

        logger.debug("Unmarshalled %s link", record.kind.name)
        return record
