from pydantic import BaseModel, Field, field_serializer, field_validator
from typing import Optional, Union, Any, Dict
from datetime import date, datetime, timezone

from bson import ObjectId

Number = Union[int, float]

# Fields a client may send; anything else in a body is ignored.
FOOD_FIELDS = ("name", "category", "quantity", "expirationDate", "price")


def format_timestamp(value: datetime) -> str:
    """Render a datetime as UTC with millisecond precision, e.g. 2024-05-01T00:00:00.000Z"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class FoodFields(BaseModel):
    """Partial food item as sent by clients. Every field is optional."""

    name: Optional[str] = Field(None, description="Food name (e.g., 'Apple')")
    category: Optional[str] = Field(None, description="Category (e.g., 'Fruit')")
    quantity: Optional[Number] = Field(None, description="Number of units in stock")
    expirationDate: Optional[datetime] = Field(
        None, description="Date ('2024-05-01') or full ISO timestamp, stored as UTC"
    )
    price: Optional[Number] = Field(None, description="Unit price")

    model_config = {"extra": "ignore"}

    @field_validator("expirationDate", mode="before")
    @classmethod
    def parse_date_only(cls, v):
        """A bare calendar date means midnight UTC of that day"""
        if isinstance(v, str) and len(v) == 10:
            try:
                return datetime.strptime(v, "%Y-%m-%d").replace(tzinfo=timezone.utc)
            except ValueError:
                return v
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day, tzinfo=timezone.utc)
        return v

    @field_validator("expirationDate")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    def provided_fields(self) -> Dict[str, Any]:
        """Fields present in the request body, including explicit nulls"""
        return self.model_dump(exclude_unset=True)


class FoodCreate(FoodFields):
    """Schema for creating a new food item"""

    def to_document(self) -> Dict[str, Any]:
        document = self.provided_fields()
        document["__v"] = 0
        return document


class FoodUpdate(FoodFields):
    """Schema for updating a food item"""

    def has_update_data(self) -> bool:
        """
        True if at least one recognized field is truthy.

        A body whose only fields are 0, "" or null counts as empty, so
        {"quantity": 0} on its own is rejected.
        """
        return any(getattr(self, field) for field in FOOD_FIELDS)


class FoodResponse(BaseModel):
    """Schema for food item response, keyed the way documents are stored"""

    id: str = Field(..., alias="_id")
    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[Number] = None
    expirationDate: Optional[datetime] = None
    price: Optional[Number] = None
    schema_version: Optional[int] = Field(None, alias="__v")

    model_config = {"populate_by_name": True}

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @field_serializer("expirationDate")
    def serialize_expiration_date(self, v: Optional[datetime]) -> Optional[str]:
        if v is None:
            return None
        return format_timestamp(v)


class MessageResponse(BaseModel):
    """Confirmation or error body"""

    message: str
