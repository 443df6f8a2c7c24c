from fastapi import APIRouter, status
import logging

from sharelink.models.link import GroupDescriptor, link_for_group, link_for_identity
from sharelink.schemas.ContactLinkRequest import ContactLinkRequest
from sharelink.schemas.GroupLinkRequest import GroupLinkRequest
from sharelink.schemas.LinkParseRequest import LinkParseRequest
from sharelink.schemas.LinkRecordResponse import LinkRecordResponse
from sharelink.schemas.SharedLinksResponse import SharedLinksResponse
from sharelink.services.linker import LinkService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/links", tags=["links"])

@router.post("/contact", response_model=SharedLinksResponse, status_code=status.HTTP_201_CREATED)
def create_contact_link_endpoint(link_request: ContactLinkRequest):
    record = link_for_identity(
        link_request.account_public_key,
        link_request.public_rendezvous_seed,
        link_request.display_name or "",
    )
    internal, web = LinkService.marshal(record)
    logger.info("API success: contact link created")
    return SharedLinksResponse(kind="contact", internal=internal, web=web)

@router.post("/group", response_model=SharedLinksResponse, status_code=status.HTTP_201_CREATED)
def create_group_link_endpoint(link_request: GroupLinkRequest):
    group = GroupDescriptor(
        public_key=link_request.public_key,
        secret=link_request.secret,
        secret_signature=link_request.secret_signature,
        group_type=link_request.group_type,
        signing_public_key=link_request.signing_public_key,
    )
    internal, web = LinkService.marshal(link_for_group(group, link_request.display_name or ""))
    logger.info("API success: group link created")
    return SharedLinksResponse(kind="group", internal=internal, web=web)

@router.post("/parse", response_model=LinkRecordResponse)
def parse_link_endpoint(parse_request: LinkParseRequest):
    record = LinkService.unmarshal(parse_request.link)
    return LinkRecordResponse.from_record(record)
