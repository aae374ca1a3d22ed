"""Wishlist router: folders of saved listings for the current user"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from wishlist_api.core.security import get_current_user
from wishlist_api.services.wishlist_service import WishlistService
from wishlist_api.schemas.wishlist import FolderCreate, WishlistItemCreate, WishlistResponse
from wishlist_api.utils.dependencies import get_wishlist_service

router = APIRouter()

@router.get("/", response_model=WishlistResponse)
async def get_wishlist(
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service)
):
    """Get the wishlist, creating it on first access"""
    return await service.get_or_create_wishlist(current_user["id"])

@router.post("/folder", response_model=WishlistResponse)
async def create_folder(
    folder_data: FolderCreate,
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service)
):
    """Create a new folder"""
    return await service.create_folder(current_user["id"], folder_data.name)

@router.post("/folder/{folder_id}/item", response_model=WishlistResponse)
async def add_item_to_folder(
    folder_id: str,
    item_data: WishlistItemCreate,
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service)
):
    """Save a listing into a folder"""
    return await service.add_item(
        user_id=current_user["id"],
        folder_id=folder_id,
        ref_id=item_data.ref_id,
        item_type=item_data.type
    )

@router.delete("/folder/{folder_id}/item/{item_id}", response_model=WishlistResponse)
async def remove_item_from_folder(
    folder_id: str,
    item_id: str,
    item_type: Optional[str] = Query(None, alias="type", description="Only remove items of this type"),
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service)
):
    """Remove an item (by catalog ID) from a folder"""
    return await service.remove_item(
        user_id=current_user["id"],
        folder_id=folder_id,
        item_id=item_id,
        item_type=item_type
    )

@router.delete("/folder/{folder_id}", response_model=WishlistResponse)
async def delete_folder(
    folder_id: str,
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service)
):
    """Delete a folder and its items"""
    return await service.delete_folder(current_user["id"], folder_id)
