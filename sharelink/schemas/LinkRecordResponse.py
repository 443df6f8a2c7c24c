from pydantic import BaseModel, field_serializer
from typing import Optional

from sharelink.models.link import LinkKind
from sharelink.services.web_link import KIND_TAGS
from sharelink.utils.encoding import bytes_to_b64


class ContactPayload(BaseModel):
    account_public_key: bytes
    public_rendezvous_seed: bytes
    display_name: str = ""

    @field_serializer('account_public_key', 'public_rendezvous_seed', when_used='json')
    def encode_bytes(self, v: bytes):
        return bytes_to_b64(v)


class GroupPayload(BaseModel):
    public_key: bytes
    secret: bytes
    secret_signature: bytes
    group_type: int
    signing_public_key: bytes

    @field_serializer('public_key', 'secret', 'secret_signature', 'signing_public_key', when_used='json')
    def encode_bytes(self, v: bytes):
        return bytes_to_b64(v)


# Response DTOs
class LinkRecordResponse(BaseModel):
    kind: str
    display_name: str = ""
    contact: Optional[ContactPayload] = None
    group: Optional[GroupPayload] = None

    @classmethod
    def from_record(cls, record) -> "LinkRecordResponse":
        if record.kind == LinkKind.CONTACT_INVITE_V1:
            contact = record.contact
            return cls(
                kind=KIND_TAGS[record.kind],
                display_name=contact.display_name,
                contact=ContactPayload(
                    account_public_key=contact.account_public_key,
                    public_rendezvous_seed=contact.public_rendezvous_seed,
                    display_name=contact.display_name,
                ),
            )

        info = record.group_info
        group = None
        if info.group is not None:
            group = GroupPayload(
                public_key=info.group.public_key,
                secret=info.group.secret,
                secret_signature=info.group.secret_signature,
                group_type=int(info.group.group_type),
                signing_public_key=info.group.signing_public_key,
            )
        return cls(kind=KIND_TAGS[record.kind], display_name=info.display_name, group=group)
