"""CRUD routers for the marketing resources, built from one descriptor per table."""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from adonstreet.core.database import get_db
from adonstreet.models import (
    BalloonMarketing,
    Base,
    Hoarding,
    OutdoorMarketingScreen,
    SocietyMarketing,
    VehicleMarketing,
)
from adonstreet.schemas.common import CreatedResponse, MessageResponse
from adonstreet.schemas.resources import (
    BalloonMarketingPayload,
    BalloonMarketingRecord,
    HoardingPayload,
    HoardingRecord,
    OutdoorMarketingScreenPayload,
    OutdoorMarketingScreenRecord,
    SocietyMarketingPayload,
    SocietyMarketingRecord,
    VehicleMarketingPayload,
    VehicleMarketingRecord,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resource:
    """
    One CRUD resource family.

    name: URL path segment and dashboard key (e.g. "vehicles").
    label: singular used in confirmation messages ("Vehicle created").
    key: primary key attribute of model.
    """

    name: str
    label: str
    model: type[Base]
    key: str
    payload: type[BaseModel]
    record: type[BaseModel]
    not_found: str = "Record not found"


RESOURCES: tuple[Resource, ...] = (
    Resource(
        name="vehicles",
        label="Vehicle",
        model=VehicleMarketing,
        key="v_id",
        payload=VehicleMarketingPayload,
        record=VehicleMarketingRecord,
    ),
    Resource(
        name="societies",
        label="Society",
        model=SocietyMarketing,
        key="s_id",
        payload=SocietyMarketingPayload,
        record=SocietyMarketingRecord,
    ),
    Resource(
        name="balloons",
        label="Balloon",
        model=BalloonMarketing,
        key="b_id",
        payload=BalloonMarketingPayload,
        record=BalloonMarketingRecord,
    ),
    Resource(
        name="screens",
        label="Screen",
        model=OutdoorMarketingScreen,
        key="ScreenID",
        payload=OutdoorMarketingScreenPayload,
        record=OutdoorMarketingScreenRecord,
        not_found="Screen not found",
    ),
    Resource(
        name="hoardings",
        label="Hoarding",
        model=Hoarding,
        key="h_id",
        payload=HoardingPayload,
        record=HoardingRecord,
        not_found="Hoarding not found",
    ),
)


def build_resource_router(resource: Resource) -> APIRouter:
    """
    Return list/get/create/replace/delete routes for one resource.

    Replace is a full overwrite: fields missing from the body become NULL.
    """
    router = APIRouter()
    model = resource.model
    key_column = getattr(model, resource.key)
    Payload = resource.payload
    Record = resource.record

    def get_or_404(db: Session, record_id: int):
        obj = db.get(model, record_id)
        if obj is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=resource.not_found,
            )
        return obj

    @router.get("", response_model=list[Record], name=f"list_{resource.name}")
    def list_records(db: Annotated[Session, Depends(get_db)]):
        return db.query(model).order_by(key_column).all()

    @router.get("/{record_id}", response_model=Record, name=f"get_{resource.name}")
    def get_record(record_id: int, db: Annotated[Session, Depends(get_db)]):
        return get_or_404(db, record_id)

    @router.post(
        "",
        response_model=CreatedResponse,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{resource.name}",
    )
    def create_record(body: Payload, db: Annotated[Session, Depends(get_db)]) -> CreatedResponse:
        obj = model(**body.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        new_id = getattr(obj, resource.key)
        logger.info("Created %s id=%s", resource.name, new_id)
        return CreatedResponse(message=f"{resource.label} created", id=new_id)

    @router.put("/{record_id}", response_model=MessageResponse, name=f"replace_{resource.name}")
    def replace_record(
        record_id: int,
        body: Payload,
        db: Annotated[Session, Depends(get_db)],
    ) -> MessageResponse:
        obj = get_or_404(db, record_id)
        for field, value in body.model_dump().items():
            setattr(obj, field, value)
        db.commit()
        logger.info("Replaced %s id=%s", resource.name, record_id)
        return MessageResponse(message=f"{resource.label} updated")

    @router.delete("/{record_id}", response_model=MessageResponse, name=f"delete_{resource.name}")
    def delete_record(record_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
        obj = get_or_404(db, record_id)
        db.delete(obj)
        db.commit()
        logger.info("Deleted %s id=%s", resource.name, record_id)
        return MessageResponse(message=f"{resource.label} deleted")

    return router
