from pydantic import BaseModel

class SharedLinksResponse(BaseModel):
    kind: str
    # BERTY://PB/... for QR codes
    internal: str
    # https://berty.tech/id#... for sharing anywhere else
    web: str
