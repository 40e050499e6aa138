import math
from decimal import Decimal
from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional

# Stored and computed as Decimal, sent to clients as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class CamelModel(BaseModel):
    """Base for wire models: snake_case attributes, camelCase JSON"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

# Response envelopes
class ApiResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "Pagination":
        return cls(total=total, page=page, limit=limit, pages=math.ceil(total / limit) if limit else 0)
