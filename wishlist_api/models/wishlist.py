"""
Wishlist aggregate: one wishlist per user, owning folders of saved items
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Index, UniqueConstraint, Uuid
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
import enum

from .base import Base, TimestampedModel, UUIDModel

class ItemType(str, enum.Enum):
    """Kinds of catalog entities a wishlist item can reference"""
    LISTING = "listing"
    EXPERIENCE = "experience"
    SERVICE = "service"

class Wishlist(Base, UUIDModel, TimestampedModel):
    """Aggregate root: a user's saved folders"""

    __tablename__ = "wishlists"

    user_id = Column(String(64), nullable=False, unique=True)

    # Optimistic lock, bumped on every write of the aggregate
    version = Column(Integer, nullable=False)

    folders = relationship(
        "WishlistFolder",
        back_populates="wishlist",
        order_by="WishlistFolder.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

    def find_folder(self, folder_id):
        """Linear scan over folders, O(number of folders)"""
        for folder in self.folders:
            if folder.id == folder_id:
                return folder
        return None

    def __repr__(self):
        return f"<Wishlist(user_id={self.user_id!r}, folders={len(self.folders)})>"

class WishlistFolder(Base, UUIDModel, TimestampedModel):
    """Named, ordered group of items inside a wishlist"""

    __tablename__ = "wishlist_folders"

    wishlist_id = Column(Uuid, ForeignKey("wishlists.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    wishlist = relationship("Wishlist", back_populates="folders")
    items = relationship(
        "WishlistItem",
        back_populates="folder",
        order_by="WishlistItem.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("idx_wishlist_folder_wishlist", "wishlist_id"),
    )

    def has_item(self, ref_id: str, item_type: str) -> bool:
        return any(
            item.ref_id == ref_id and item.type == item_type
            for item in self.items
        )

class WishlistItem(Base, UUIDModel):
    """Reference to a catalog entity saved in a folder"""

    __tablename__ = "wishlist_items"

    folder_id = Column(Uuid, ForeignKey("wishlist_folders.id", ondelete="CASCADE"), nullable=False)
    ref_id = Column(String(64), nullable=False)
    type = Column(String(20), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    folder = relationship("WishlistFolder", back_populates="items")

    # Constraints
    __table_args__ = (
        UniqueConstraint("folder_id", "ref_id", "type", name="uq_folder_item_ref"),
        Index("idx_wishlist_item_folder", "folder_id"),
    )
