"""Pydantic schemas for the five marketing resources.

Payload models carry every writable column. All fields are optional and only
type-coerced; a field left out of a create or replace request is stored as NULL.
Record models add the generated key and creation timestamp for responses.
"""

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict


class VehicleMarketingPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    v_type: str | None = None
    v_number: str | None = None
    v_area: str | None = None
    v_city: str | None = None
    v_start_date: date | None = None
    v_end_date: date | None = None
    v_duration_days: int | None = None
    expected_crowd: int | None = None
    v_contact_person_name: str | None = None
    v_contact_num: str | None = None
    v_cost: float | None = None
    payment_status: str | None = None
    remarks: str | None = None


class VehicleMarketingRecord(VehicleMarketingPayload):
    model_config = ConfigDict(from_attributes=True)

    v_id: int
    created_at: datetime | None = None


class SocietyMarketingPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    s_name: str | None = None
    s_area: str | None = None
    s_city: str | None = None
    s_pincode: str | None = None
    s_contact_person_name: str | None = None
    s_contact_num: str | None = None
    s_no_flats: int | None = None
    s_type: str | None = None
    s_event_type: str | None = None
    event_date: date | None = None
    event_time: time | None = None
    s_address: str | None = None
    s_lat: float | None = None
    s_long: float | None = None
    s_crowd: int | None = None
    approval_status: str | None = None
    event_status: str | None = None
    expected_cost: float | None = None
    actual_cost: float | None = None
    responsible_person: str | None = None
    follow_up_date: date | None = None
    remarks: str | None = None


class SocietyMarketingRecord(SocietyMarketingPayload):
    model_config = ConfigDict(from_attributes=True)

    s_id: int
    created_at: datetime | None = None


class BalloonMarketingPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    b_location_name: str | None = None
    b_area: str | None = None
    b_city: str | None = None
    b_address: str | None = None
    b_lat: float | None = None
    b_long: float | None = None
    b_size: str | None = None
    b_type: str | None = None
    b_height: int | None = None
    b_duration_days: int | None = None
    b_start_date: date | None = None
    b_end_date: date | None = None
    expected_crowd: int | None = None
    b_contact_person_name: str | None = None
    b_contact_num: str | None = None
    b_cost: float | None = None
    payment_status: str | None = None
    remarks: str | None = None


class BalloonMarketingRecord(BalloonMarketingPayload):
    model_config = ConfigDict(from_attributes=True)

    b_id: int
    created_at: datetime | None = None


class OutdoorMarketingScreenPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ScreenName: str | None = None
    Location: str | None = None
    City: str | None = None
    State: str | None = None
    Latitude: float | None = None
    Longitude: float | None = None
    ScreenType: str | None = None
    Size: str | None = None
    Resolution: str | None = None
    OwnerName: str | None = None
    ContactPerson: str | None = None
    ContactNumber: str | None = None
    OnboardingDate: date | None = None
    Status: str | None = None
    RentalCost: float | None = None
    ContractStartDate: date | None = None
    ContractEndDate: date | None = None
    PowerBackup: bool | None = None
    InternetConnectivity: str | None = None
    Notes: str | None = None


class OutdoorMarketingScreenRecord(OutdoorMarketingScreenPayload):
    model_config = ConfigDict(from_attributes=True)

    ScreenID: int
    created_at: datetime | None = None


class HoardingPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    h_name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    size: str | None = None
    owner_name: str | None = None
    contact_person: str | None = None
    contact_number: str | None = None
    ad_start_date: date | None = None
    ad_end_date: date | None = None
    status: str | None = None
    rental_cost: float | None = None
    contract_start_date: date | None = None
    contract_end_date: date | None = None
    notes: str | None = None


class HoardingRecord(HoardingPayload):
    model_config = ConfigDict(from_attributes=True)

    h_id: int
    created_at: datetime | None = None
