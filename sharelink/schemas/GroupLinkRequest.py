from pydantic import BaseModel, field_validator
from typing import Optional

from sharelink.models.link import GroupType
from sharelink.utils.encoding import b64_to_bytes

class GroupLinkRequest(BaseModel):
    public_key: bytes
    secret: bytes
    secret_signature: bytes
    group_type: GroupType = GroupType.MULTI_MEMBER
    signing_public_key: bytes
    display_name: Optional[str] = None

    @field_validator('public_key', 'secret', 'secret_signature', 'signing_public_key', mode='before')
    def decode_bytes(cls, v):
        return b64_to_bytes(v)
