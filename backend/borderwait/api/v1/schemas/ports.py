from pydantic import BaseModel, Field


class PortIdentifier(BaseModel):
    prefix: str = Field(..., min_length=2, max_length=2)
    port_of_entry: str = Field(..., min_length=4, max_length=4)
    suffix: str = Field(..., min_length=2, max_length=2)

    port_id: str = Field(..., description="8-digit zero-padded identifier")
    value: int
    details_url: str


class HealthResponse(BaseModel):
    ok: bool = True
