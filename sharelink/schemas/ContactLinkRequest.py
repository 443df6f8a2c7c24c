from pydantic import BaseModel, field_validator
from typing import Optional

from sharelink.utils.encoding import b64_to_bytes

# Request DTOs
class ContactLinkRequest(BaseModel):
    # byte fields are base64 in JSON
    account_public_key: bytes
    public_rendezvous_seed: bytes
    display_name: Optional[str] = None

    @field_validator('account_public_key', 'public_rendezvous_seed', mode='before')
    def decode_bytes(cls, v):
        return b64_to_bytes(v)
