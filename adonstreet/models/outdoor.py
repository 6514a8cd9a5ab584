"""ORM models for fixed outdoor inventory: digital screens and hoardings."""

from sqlalchemy import Boolean, Column, Date, DateTime, Float, Integer, String, Text, func

from adonstreet.models.base import Base


class OutdoorMarketingScreen(Base):
    """
    Digital outdoor screen under contract.

    Column names are CamelCase in this table and are exposed as-is in the API.
    Status: Active, Inactive, Maintenance or Pending.
    """

    __tablename__ = "outdoormarketingscreens"

    ScreenID = Column(Integer, primary_key=True, autoincrement=True)
    ScreenName = Column(String(255), nullable=True)
    Location = Column(String(255), nullable=True)
    City = Column(String(100), nullable=True)
    State = Column(String(100), nullable=True)
    Latitude = Column(Float, nullable=True)
    Longitude = Column(Float, nullable=True)
    ScreenType = Column(String(50), nullable=True)
    Size = Column(String(50), nullable=True)
    Resolution = Column(String(50), nullable=True)
    OwnerName = Column(String(255), nullable=True)
    ContactPerson = Column(String(255), nullable=True)
    ContactNumber = Column(String(20), nullable=True)
    OnboardingDate = Column(Date, nullable=True)
    Status = Column(String(50), nullable=True)
    RentalCost = Column(Float, nullable=True)
    ContractStartDate = Column(Date, nullable=True)
    ContractEndDate = Column(Date, nullable=True)
    PowerBackup = Column(Boolean, nullable=True)
    InternetConnectivity = Column(String(50), nullable=True)
    Notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Hoarding(Base):
    """Static billboard. status: Available, Occupied, Under Maintenance or Booked."""

    __tablename__ = "hoardings"

    h_id = Column(Integer, primary_key=True, autoincrement=True)
    h_name = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    size = Column(String(50), nullable=True)
    owner_name = Column(String(255), nullable=True)
    contact_person = Column(String(255), nullable=True)
    contact_number = Column(String(20), nullable=True)
    ad_start_date = Column(Date, nullable=True)
    ad_end_date = Column(Date, nullable=True)
    status = Column(String(50), nullable=True)
    rental_cost = Column(Float, nullable=True)
    contract_start_date = Column(Date, nullable=True)
    contract_end_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
