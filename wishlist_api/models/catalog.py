"""
Catalog entities that wishlist items may reference
Only existence and availability matter here; the catalog itself is owned elsewhere
"""

from sqlalchemy import Column, String, Boolean, Numeric, Integer

from .base import Base, TimestampedModel, UUIDModel

class CatalogEntity(UUIDModel, TimestampedModel):
    """Columns shared by every bookable catalog entity"""

    title = Column(String(200), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)

class Listing(Base, CatalogEntity):
    """Bookable stay"""

    __tablename__ = "listings"

    location = Column(String(255), nullable=True)
    price_per_night = Column(Numeric(10, 2), nullable=True)
    max_guests = Column(Integer, nullable=True)

class Experience(Base, CatalogEntity):
    """Hosted activity (reserved item type)"""

    __tablename__ = "experiences"

    location = Column(String(255), nullable=True)
    price_per_person = Column(Numeric(10, 2), nullable=True)

class Service(Base, CatalogEntity):
    """Add-on service (reserved item type)"""

    __tablename__ = "services"

    price = Column(Numeric(10, 2), nullable=True)
