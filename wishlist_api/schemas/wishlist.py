"""
Wishlist schemas for request/response validation
Field names are camelCase on the wire
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
import uuid

class CamelModel(BaseModel):
    """Base schema exposing camelCase aliases"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class FolderCreate(CamelModel):
    """Schema for creating a folder"""
    # Blank or missing names are rejected by the service with a 400
    name: Optional[str] = Field(None, description="Folder display name")

class WishlistItemCreate(CamelModel):
    """Schema for saving a catalog entity into a folder"""
    ref_id: str = Field(..., min_length=1, max_length=64, description="Catalog entity ID")
    # Kept as a plain string so an unknown tag surfaces as a 400, not a 422
    type: str = Field(..., description="Catalog entity type, e.g. 'listing'")

class WishlistItemResponse(CamelModel):
    """Schema for a saved item"""
    ref_id: str
    type: str

class FolderResponse(CamelModel):
    """Schema for a folder with its items"""
    id: uuid.UUID
    name: str
    items: List[WishlistItemResponse] = []

class WishlistResponse(CamelModel):
    """Schema for the complete wishlist aggregate"""
    user_id: str
    version: int
    folders: List[FolderResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "userId": "64f1c0ffee",
                "version": 3,
                "folders": [
                    {
                        "id": "5b1e7c52-8f5e-4b43-9f0b-3f7f6a0d2b11",
                        "name": "Favorites",
                        "items": [{"refId": "9a4c...", "type": "listing"}],
                    }
                ],
                "createdAt": "2025-01-01T10:00:00Z",
                "updatedAt": "2025-01-02T10:00:00Z",
            }
        }
    )
