# re-export common schemas for simpler imports
from .ContactLinkRequest import ContactLinkRequest
from .GroupLinkRequest import GroupLinkRequest
from .LinkParseRequest import LinkParseRequest
from .SharedLinksResponse import SharedLinksResponse
from .LinkRecordResponse import LinkRecordResponse

__all__ = [
    "ContactLinkRequest",
    "GroupLinkRequest",
    "LinkParseRequest",
    "SharedLinksResponse",
    "LinkRecordResponse",
]
