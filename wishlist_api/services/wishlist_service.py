"""
Wishlist service layer
Owns every rule of the per-user wishlist aggregate
"""

from typing import Iterable, Optional, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy import select
import logging
import uuid

from wishlist_api.models import Wishlist, WishlistFolder, WishlistItem
from wishlist_api.core.config import settings
from wishlist_api.core.exceptions import (
    ValidationError,
    NotFoundError,
    StorageError,
    DuplicateItemError,
    ConcurrentModificationError,
)
from wishlist_api.schemas.wishlist import WishlistResponse
from .catalog import CatalogLookup

logger = logging.getLogger(__name__)

FolderId = Union[str, uuid.UUID]

def parse_folder_id(folder_id: FolderId) -> Optional[uuid.UUID]:
    """Coerce a path parameter to a folder UUID, None if malformed"""
    if isinstance(folder_id, uuid.UUID):
        return folder_id
    try:
        return uuid.UUID(str(folder_id))
    except ValueError:
        return None

class WishlistService:
    """
    Wishlist aggregate service

    Every mutation loads (or lazily creates) the whole aggregate, changes it
    in memory and commits it in one transaction. The aggregate root carries a
    version counter, so a write based on a stale read fails with a conflict
    instead of silently discarding the other write.
    """

    def __init__(
        self,
        db: AsyncSession,
        catalog: CatalogLookup,
        active_item_types: Optional[Iterable[str]] = None
    ):
        self.db = db
        self.catalog = catalog
        self.active_item_types = set(
            settings.ACTIVE_ITEM_TYPES if active_item_types is None else active_item_types
        )

    async def get_or_create_wishlist(self, user_id: str) -> WishlistResponse:
        """
        Get the user's wishlist, creating an empty one on first access

        Args:
            user_id: Authenticated user ID

        Returns:
            Complete wishlist

        Raises:
            StorageError: If the store is unavailable
        """
        wishlist = await self._ensure_wishlist(user_id)
        return WishlistResponse.model_validate(wishlist)

    async def create_folder(self, user_id: str, name: Optional[str]) -> WishlistResponse:
        """
        Append a new empty folder

        Args:
            user_id: Authenticated user ID
            name: Display name, must not be blank

        Returns:
            Updated wishlist

        Raises:
            ValidationError: If the name is blank or too long
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Folder name is required")
        if len(name) > settings.MAX_FOLDER_NAME_LENGTH:
            raise ValidationError(
                f"Folder name must be at most {settings.MAX_FOLDER_NAME_LENGTH} characters"
            )

        wishlist = await self._ensure_wishlist(user_id)

        folder = WishlistFolder(name=name, items=[])
        wishlist.folders.append(folder)

        response = await self._save(wishlist)
        logger.info(f"User {user_id} created folder {folder.id}")
        return response

    async def add_item(
        self,
        user_id: str,
        folder_id: FolderId,
        ref_id: str,
        item_type: str
    ) -> WishlistResponse:
        """
        Save a catalog entity into a folder

        Args:
            user_id: Authenticated user ID
            folder_id: Target folder
            ref_id: Catalog entity ID
            item_type: Catalog entity type

        Returns:
            Updated wishlist

        Raises:
            ValidationError: If the type is not an active item type
            NotFoundError: If the catalog entity or the folder does not exist
            ConflictError: If the item is already in the folder
        """
        if item_type not in self.active_item_types:
            raise ValidationError("Invalid item type")

        ref_id = self.catalog.canonical_ref_id(ref_id)
        if not await self.catalog.exists(ref_id, item_type):
            raise NotFoundError("Item not found")

        wishlist = await self._ensure_wishlist(user_id)
        folder = self._get_folder(wishlist, folder_id)

        if folder.has_item(ref_id, item_type):
            raise DuplicateItemError()

        folder.items.append(WishlistItem(ref_id=ref_id, type=item_type))

        response = await self._save(wishlist, adding_item=True)
        logger.info(f"User {user_id} saved {item_type} {ref_id} to folder {folder.id}")
        return response

    async def remove_item(
        self,
        user_id: str,
        folder_id: FolderId,
        item_id: str,
        item_type: Optional[str] = None
    ) -> WishlistResponse:
        """
        Remove saved items by catalog ID

        Without ``item_type`` every item whose ref ID matches is removed,
        whatever its type. Removing an item that is not there succeeds.

        Raises:
            NotFoundError: If the folder does not exist
        """
        wishlist = await self._ensure_wishlist(user_id)
        folder = self._get_folder(wishlist, folder_id)

        item_id = self.catalog.canonical_ref_id(item_id)
        doomed = [
            item for item in folder.items
            if item.ref_id == item_id and (item_type is None or item.type == item_type)
        ]
        if not doomed:
            return WishlistResponse.model_validate(wishlist)

        for item in doomed:
            folder.items.remove(item)

        response = await self._save(wishlist)
        logger.info(f"User {user_id} removed {len(doomed)} item(s) {item_id} from folder {folder.id}")
        return response

    async def delete_folder(self, user_id: str, folder_id: FolderId) -> WishlistResponse:
        """
        Delete a folder and everything in it

        Deleting a folder that does not exist succeeds.
        """
        wishlist = await self._ensure_wishlist(user_id)

        parsed_id = parse_folder_id(folder_id)
        folder = wishlist.find_folder(parsed_id) if parsed_id else None
        if folder is None:
            return WishlistResponse.model_validate(wishlist)

        wishlist.folders.remove(folder)

        response = await self._save(wishlist)
        logger.info(f"User {user_id} deleted folder {parsed_id}")
        return response

    def _get_folder(self, wishlist: Wishlist, folder_id: FolderId) -> WishlistFolder:
        parsed_id = parse_folder_id(folder_id)
        folder = wishlist.find_folder(parsed_id) if parsed_id else None
        if folder is None:
            raise NotFoundError("Folder not found")
        return folder

    async def _load(self, user_id: str) -> Optional[Wishlist]:
        result = await self.db.execute(
            select(Wishlist)
            .options(
                selectinload(Wishlist.folders).selectinload(WishlistFolder.items)
            )
            .where(Wishlist.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _ensure_wishlist(self, user_id: str) -> Wishlist:
        try:
            wishlist = await self._load(user_id)
            if wishlist is not None:
                return wishlist

            wishlist = Wishlist(user_id=user_id, folders=[])
            self.db.add(wishlist)
            try:
                await self.db.commit()
            except IntegrityError:
                # A concurrent request created it first; use theirs
                await self.db.rollback()
                wishlist = await self._load(user_id)
                if wishlist is None:
                    raise StorageError("Wishlist could not be created")
                return wishlist
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to load wishlist for user {user_id}: {e}")
            raise StorageError()

        logger.info(f"Created wishlist for user {user_id}")
        return wishlist

    async def _save(self, wishlist: Wishlist, adding_item: bool = False) -> WishlistResponse:
        # Always rewrite the root row so the version check covers child changes
        wishlist.touch()
        # Rollback expires the instance, read the owner beforehand
        user_id = wishlist.user_id
        try:
            await self.db.commit()
        except StaleDataError:
            await self.db.rollback()
            logger.warning(f"Concurrent write rejected for wishlist of user {user_id}")
            raise ConcurrentModificationError()
        except IntegrityError as e:
            await self.db.rollback()
            # On add_item this is the (folder, ref_id, type) constraint
            if adding_item:
                raise DuplicateItemError()
            logger.error(f"Integrity error saving wishlist for user {user_id}: {e}")
            raise StorageError()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to save wishlist for user {user_id}: {e}")
            raise StorageError()

        return WishlistResponse.model_validate(wishlist)
