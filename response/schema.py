from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


# Uniform wrapper for every successful response
class SuccessResponse(BaseModel, Generic[DataT]):
    message: str
    status_code: int = Field(alias="statusCode")
    data: Optional[DataT] = None
    model_config = ConfigDict(populate_by_name=True)


def success(message: str, status_code: int, data: Any = None) -> dict:
    """Build the envelope body; the route's response_model validates ``data``."""
    return {"message": message, "statusCode": status_code, "data": data}
