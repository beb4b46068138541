"""Quote data model."""

from pydantic import BaseModel, Field


class Quote(BaseModel):
    """A single price observation for an asset, in USD."""

    asset_id: str = Field(..., min_length=1, description="API asset identifier")
    price: float = Field(..., ge=0, description="Price in USD")

    model_config = {"frozen": True}
