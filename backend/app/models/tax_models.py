from enum import Enum
from typing import List, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FilingStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    HEAD_OF_HOUSEHOLD = "head_of_household"


class TaxBracket(NamedTuple):
    limit: float
    rate: float


class CalculationResult(BaseModel):
    """Output of a single tax calculation. Values are unrounded."""

    model_config = ConfigDict(frozen=True)

    gross: float
    federal: float
    fica: float
    additional_medicare: float
    state: float
    total_tax: float
    net: float


class TaxBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross: float
    federal: float
    fica: float
    additional_medicare: float
    state: float
    total_tax: float
    net: float
    monthly_net: float
    biweekly_net: float
    effective_rate: float = Field(..., description="Total tax as a percentage of gross")


class TaxCalculationRequest(BaseModel):
    gross_income: float = Field(..., gt=0, allow_inf_nan=False, description="Gross annual salary")
    state: str = Field("", description="State name, e.g. 'New York'")
    filing_status: str = Field(FilingStatus.SINGLE.value, description="single, married or head_of_household")

    @field_validator("state", "filing_status")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return value.strip()


class TaxCalculationResponse(TaxBreakdown):
    state_name: str
    filing_status: FilingStatus
    disclaimer: str


class StateTaxRate(BaseModel):
    code: str
    name: str
    slug: str
    rate: float


class StateTaxRatesResponse(BaseModel):
    states: List[StateTaxRate]


class SalaryLink(BaseModel):
    amount: int
    href: str
    label: str


class PageMetadata(BaseModel):
    title: str
    description: str
