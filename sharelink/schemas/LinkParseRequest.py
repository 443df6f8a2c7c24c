from pydantic import BaseModel, field_validator

from sharelink.core.config import settings

class LinkParseRequest(BaseModel):
    link: str

    @field_validator('link')
    def validate_link(cls, v):
        if len(v) > settings.MAX_LINK_LENGTH:
            raise ValueError(f'link must be at most {settings.MAX_LINK_LENGTH} characters')
        return v.strip()
