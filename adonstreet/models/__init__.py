"""SQLAlchemy ORM models."""

from adonstreet.models.base import Base
from adonstreet.models.marketing import BalloonMarketing, SocietyMarketing, VehicleMarketing
from adonstreet.models.outdoor import Hoarding, OutdoorMarketingScreen
from adonstreet.models.user import User

__all__ = [
    "Base",
    "BalloonMarketing",
    "Hoarding",
    "OutdoorMarketingScreen",
    "SocietyMarketing",
    "User",
    "VehicleMarketing",
]
