"""
Pydantic Schemas for API Validation

Request bodies only check types; required fields are enforced by the
services so that every caller gets the same validation messages.
Response models keep amounts as floats so JSON carries numbers.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import datetime
from decimal import Decimal


# ==================== AUTH SCHEMAS ====================

class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

    @field_validator("password", mode="before")
    @classmethod
    def password_as_text(cls, value):
        # Numeric JSON passwords are compared as their text form
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class UserInfo(BaseModel):
    id: int
    username: str


class LoginResponse(BaseModel):
    token: str
    user: UserInfo


# ==================== PARTY SCHEMAS ====================

class PartyBase(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    contact: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = None
    gstin: Optional[str] = Field(None, max_length=20)


class PartyCreate(PartyBase):
    pass


class PartyUpdate(PartyBase):
    pass


class PartyResponse(PartyBase):
    id: int
    created_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PartyChallanResponse(PartyResponse):
    """Party found through one of its challans"""
    challan_number: str
    challan_date: Optional[datetime.date] = None
    challan_amount: float = 0
    description: Optional[str] = None


# ==================== CHALLAN SCHEMAS ====================

class ChallanBase(BaseModel):
    challan_number: Optional[str] = Field(None, max_length=100)
    party_id: Optional[int] = None
    date: Optional[datetime.date] = None
    amount: Optional[Decimal] = Field(None, ge=0)
    description: Optional[str] = None


class ChallanCreate(ChallanBase):
    pass


class ChallanUpdate(ChallanBase):
    pass


class ChallanResponse(ChallanBase):
    id: int
    amount: float = 0
    created_at: Optional[datetime.datetime] = None
    party_name: Optional[str] = None
    party_contact: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== EMPLOYEE SCHEMAS ====================

class EmployeeBase(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    contact: Optional[str] = Field(None, max_length=100)
    role: Optional[str] = Field(None, max_length=100)
    joining_date: Optional[datetime.date] = None


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(EmployeeBase):
    pass


class EmployeeResponse(EmployeeBase):
    id: int
    created_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== SALARY SCHEMAS ====================

class SalaryBase(BaseModel):
    employee_id: Optional[int] = None
    month: Optional[int] = Field(None, ge=1, le=12)
    year: Optional[int] = Field(None, ge=1900, le=9999)
    amount: Optional[Decimal] = Field(None, ge=0)
    paid_date: Optional[datetime.date] = None
    notes: Optional[str] = None


class SalaryCreate(SalaryBase):
    pass


class SalaryUpdate(SalaryBase):
    pass


class SalaryResponse(SalaryBase):
    id: int
    amount: float
    created_at: Optional[datetime.datetime] = None
    employee_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== OFFICE EXPENSE SCHEMAS ====================

class OfficeExpenseBase(BaseModel):
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(None, ge=0)
    date: Optional[datetime.date] = None


class OfficeExpenseCreate(OfficeExpenseBase):
    pass


class OfficeExpenseUpdate(OfficeExpenseBase):
    pass


class OfficeExpenseResponse(OfficeExpenseBase):
    id: int
    amount: float
    created_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== PAYMENT SCHEMAS ====================

class PaymentBase(BaseModel):
    party_id: Optional[int] = None
    amount: Optional[Decimal] = Field(None, ge=0)
    payment_date: Optional[datetime.date] = None
    notes: Optional[str] = None


class PaymentCreate(PaymentBase):
    pass


class PaymentUpdate(PaymentBase):
    pass


class PaymentResponse(PaymentBase):
    id: int
    amount: float
    created_at: Optional[datetime.datetime] = None
    party_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== REPORT SCHEMAS ====================

class PartyPaymentTotal(BaseModel):
    party_id: int
    party_name: str
    total_payment: float


class OutstandingRow(BaseModel):
    party_id: int
    party_name: str
    total_challan: float
    total_paid: float
    outstanding: float


class TotalIncomingResponse(BaseModel):
    total_incoming: float
    month: str


# ==================== COMMON ====================

class OkResponse(BaseModel):
    ok: bool = True
