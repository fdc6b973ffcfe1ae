from typing import Any, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from geo.models.domain import LocationRecord, Point, Rectangle

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class PointSchema(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_domain(cls, obj: Point) -> "PointSchema":
        return cls(latitude=obj.latitude, longitude=obj.longitude)

    def to_domain(self) -> Point:
        return Point(latitude=self.latitude, longitude=self.longitude)


class RectangleSchema(BaseModel):
    lo: PointSchema = Field(default_factory=PointSchema)
    hi: PointSchema = Field(default_factory=PointSchema)

    @classmethod
    def from_domain(cls, obj: Rectangle) -> "RectangleSchema":
        return cls(lo=PointSchema.from_domain(obj.lo), hi=PointSchema.from_domain(obj.hi))

    def to_domain(self) -> Rectangle:
        return Rectangle(lo=self.lo.to_domain(), hi=self.hi.to_domain())


class BoundedBoxReply(BaseModel):
    hotel_ids: List[int] = Field(default_factory=list)


class _DatasetModel(BaseModel):
    """
    Base for the on-disk location format. Numbers are taken as-is (no string
    coercion), unknown keys are dropped and missing or null keys fall back to
    the zero value of the field. Keys match their alias regardless of case; an
    exact-case key wins over a case-folded one.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {f.alias.lower(): f.alias for f in cls.model_fields.values() if f.alias}
        folded = {}
        for key, value in data.items():
            alias = aliases.get(key.lower()) if isinstance(key, str) else None
            if alias is None or (alias in folded and key != alias):
                continue
            folded[alias] = value
        return folded

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class DatasetPointSchema(_DatasetModel):
    latitude: float = Field(0.0, alias="Latitude")
    longitude: float = Field(0.0, alias="Longitude")


class DatasetLocationSchema(_DatasetModel):
    hotel_id: int = Field(0, alias="HotelID", ge=INT32_MIN, le=INT32_MAX)
    point: DatasetPointSchema = Field(default_factory=DatasetPointSchema, alias="Point")

    def to_domain(self) -> LocationRecord:
        return LocationRecord(
            hotel_id=self.hotel_id,
            point=Point(latitude=self.point.latitude, longitude=self.point.longitude),
        )
