from pydantic import BaseModel, Field, ConfigDict


class URLCreate(BaseModel):
    # Plain str: validation belongs to the store, which keeps the URL verbatim
    url: str = Field(..., description="The original URL to be shortened")


class URLResponse(BaseModel):
    """Response schema serialized straight from a UrlRecord

    - from_attributes=True reads fields from the dataclass attributes
    """
    short_id: str
    original_url: str
    short_url: str
    visit_count: int

    # Pydantic V2 style configuration
    model_config = ConfigDict(from_attributes=True)
