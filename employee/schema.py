from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional


class EmployeeSchema(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


# PUBLIC payload for POST, any id sent by the client is ignored
class EmployeeCreatePayload(BaseModel):
    id: Optional[int] = None
    name: str
    email: str
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    # unknown profile fields are dropped, not rejected
    model_config = ConfigDict(extra="ignore")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def email_well_formed(cls, v: str) -> str:
        # check the format only, the submitted value is stored as sent
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v


# PUBLIC payload for PUT, the path id wins over the body id
class EmployeeUpdatePayload(BaseModel):
    id: Optional[int] = None
    name: str
    email: str
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    model_config = ConfigDict(extra="ignore")
