"""Pydantic schemas for API requests and responses"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


# Request Schemas

class UnitCreateRequest(BaseModel):
    """Linear unit definition submitted through the API"""
    name: str = Field(..., min_length=1, max_length=255)
    symbol: str = Field(default="", max_length=64)
    baseunit: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=255)
    factor: float = Field(..., allow_inf_nan=False)
    offset: float = Field(default=0.0, allow_inf_nan=False)


# Response Schemas

class ConversionResponse(BaseModel):
    """Envelope returned for every conversion request.

    Empty and zero fields are left out of the serialized form, so a failed
    conversion only carries ``ok`` and ``message``.
    """
    ok: bool
    message: Optional[str] = None
    result: Optional[float] = None
    category: Optional[str] = None
    from_unit: Optional[str] = Field(default=None, alias="from")
    from_symbol: Optional[str] = Field(default=None, alias="fromsymbol")
    to_unit: Optional[str] = Field(default=None, alias="to")
    to_symbol: Optional[str] = Field(default=None, alias="tosymbol")
    base_unit: Optional[str] = Field(default=None, alias="baseuom")

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler) -> Dict[str, Any]:
        data = handler(self)
        return {k: v for k, v in data.items() if k == "ok" or v not in (None, "", 0)}


class UnitSchema(BaseModel):
    """Unit descriptor"""
    name: str
    symbol: str
    category: str
    base_unit: str = Field(..., serialization_alias="baseUOM")

    model_config = {"from_attributes": True}


class CategoriesResponse(BaseModel):
    """Known unit categories"""
    categories: List[str]


class UnitsResponse(BaseModel):
    """Units of one category"""
    category: str
    units: List[UnitSchema]
