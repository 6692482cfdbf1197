from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CanadaCrossing(BaseModel):
    cbsa_office: str = Field(..., description="Office name, one line per published fragment")
    commercial_flow: str
    travellers_flow: str
    updated: datetime = Field(..., description="ISO datetime in the announced Pacific zone")

    @classmethod
    def from_record(cls, record) -> "CanadaCrossing":
        return cls.model_validate(asdict(record))


class Lanes(BaseModel):
    operational_status: Optional[str] = None
    update_time: Optional[str] = None
    delay_minutes: Optional[int] = None
    lanes_open: Optional[int] = None


class LaneGroup(BaseModel):
    maximum_lanes: Optional[int] = None
    lanes: dict[str, Lanes] = Field(default_factory=dict)


class UsCrossing(BaseModel):
    port_number: Optional[str] = None
    border: Optional[str] = None
    port_name: Optional[str] = None
    crossing_name: Optional[str] = None
    hours: Optional[str] = None
    port_status: Optional[str] = None
    construction_notice: Optional[str] = None

    date: Optional[datetime] = Field(None, description="ISO datetime in UTC")
    automation: Optional[bool] = None
    automation_enabled: Optional[bool] = None

    commercial_vehicle_lanes: Optional[LaneGroup] = None
    passenger_vehicle_lanes: Optional[LaneGroup] = None
    pedestrian_lanes: Optional[LaneGroup] = None

    @classmethod
    def from_record(cls, record) -> "UsCrossing":
        return cls.model_validate(asdict(record))
