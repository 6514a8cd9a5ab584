"""ORM models for the marketing campaign tables: vehicles, societies and balloons."""

from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text, Time, func

from adonstreet.models.base import Base


class VehicleMarketing(Base):
    """Advertising placed on a vehicle for a date range."""

    __tablename__ = "vehicle_marketing"

    v_id = Column(Integer, primary_key=True, autoincrement=True)
    v_type = Column(String(100), nullable=True)
    v_number = Column(String(50), nullable=True)
    v_area = Column(String(255), nullable=True)
    v_city = Column(String(100), nullable=True)
    v_start_date = Column(Date, nullable=True)
    v_end_date = Column(Date, nullable=True)
    v_duration_days = Column(Integer, nullable=True)
    expected_crowd = Column(Integer, nullable=True)
    v_contact_person_name = Column(String(255), nullable=True)
    v_contact_num = Column(String(20), nullable=True)
    v_cost = Column(Float, nullable=True)
    payment_status = Column(String(50), nullable=True)
    remarks = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class SocietyMarketing(Base):
    """A promotional event held in a residential society."""

    __tablename__ = "society_marketing"

    s_id = Column(Integer, primary_key=True, autoincrement=True)
    s_name = Column(String(255), nullable=True)
    s_area = Column(String(255), nullable=True)
    s_city = Column(String(100), nullable=True)
    s_pincode = Column(String(20), nullable=True)
    s_contact_person_name = Column(String(255), nullable=True)
    s_contact_num = Column(String(20), nullable=True)
    s_no_flats = Column(Integer, nullable=True)
    s_type = Column(String(100), nullable=True)
    s_event_type = Column(String(255), nullable=True)
    event_date = Column(Date, nullable=True)
    event_time = Column(Time, nullable=True)
    s_address = Column(Text, nullable=True)
    s_lat = Column(Float, nullable=True)
    s_long = Column(Float, nullable=True)
    s_crowd = Column(Integer, nullable=True)
    approval_status = Column(String(50), nullable=True)
    event_status = Column(String(50), nullable=True)
    expected_cost = Column(Float, nullable=True)
    actual_cost = Column(Float, nullable=True)
    responsible_person = Column(String(255), nullable=True)
    follow_up_date = Column(Date, nullable=True)
    remarks = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class BalloonMarketing(Base):
    """An advertising balloon flown at a location. b_type: Sky, Helium or Inflatable."""

    __tablename__ = "balloon_marketing"

    b_id = Column(Integer, primary_key=True, autoincrement=True)
    b_location_name = Column(String(255), nullable=True)
    b_area = Column(String(255), nullable=True)
    b_city = Column(String(100), nullable=True)
    b_address = Column(Text, nullable=True)
    b_lat = Column(Float, nullable=True)
    b_long = Column(Float, nullable=True)
    b_size = Column(String(50), nullable=True)
    b_type = Column(String(50), nullable=True)
    b_height = Column(Integer, nullable=True)
    b_duration_days = Column(Integer, nullable=True)
    b_start_date = Column(Date, nullable=True)
    b_end_date = Column(Date, nullable=True)
    expected_crowd = Column(Integer, nullable=True)
    b_contact_person_name = Column(String(255), nullable=True)
    b_contact_num = Column(String(20), nullable=True)
    b_cost = Column(Float, nullable=True)
    payment_status = Column(String(50), nullable=True)
    remarks = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
