"""
Catalog lookup used to validate wishlist items before they are saved
"""

from typing import Dict, Type
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
import logging
import uuid

from wishlist_api.models import Listing, Experience, Service, ItemType
from wishlist_api.core.exceptions import StorageError

logger = logging.getLogger(__name__)

class CatalogLookup:
    """Answers whether a catalog entity of a given type exists"""

    def canonical_ref_id(self, ref_id: str) -> str:
        """Single spelling of ``ref_id`` under which items are stored"""
        return ref_id

    async def exists(self, ref_id: str, item_type: str) -> bool:
        raise NotImplementedError

class DatabaseCatalogLookup(CatalogLookup):
    """Catalog lookup against the listings/experiences/services tables"""

    MODELS: Dict[str, Type] = {
        ItemType.LISTING.value: Listing,
        ItemType.EXPERIENCE.value: Experience,
        ItemType.SERVICE.value: Service,
    }

    def __init__(self, db: AsyncSession):
        self.db = db

    def canonical_ref_id(self, ref_id: str) -> str:
        """Lowercase hyphenated form for any UUID spelling, others unchanged"""
        try:
            return str(uuid.UUID(str(ref_id)))
        except ValueError:
            return ref_id

    async def exists(self, ref_id: str, item_type: str) -> bool:
        """
        Check that an active entity of ``item_type`` has id ``ref_id``

        Malformed ids and unknown types are reported as absent.

        Raises:
            StorageError: If the catalog tables cannot be queried
        """
        model = self.MODELS.get(item_type)
        if model is None:
            return False

        try:
            entity_id = uuid.UUID(str(ref_id))
        except ValueError:
            return False

        try:
            result = await self.db.execute(
                select(model.id).where(
                    model.id == entity_id,
                    model.is_active == True  # noqa: E712
                )
            )
        except SQLAlchemyError as e:
            logger.error(f"Catalog lookup failed for {item_type} {ref_id}: {e}")
            raise StorageError("Catalog lookup unavailable")

        return result.scalar_one_or_none() is not None
