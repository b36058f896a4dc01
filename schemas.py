from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RateMode(str, Enum):
    CUSTOM_RATE = "customRate"
    BASIC_SALARY = "basicSalary"
    TOTAL_SALARY = "totalSalary"
    PERCENTAGE_OF_TOTAL = "percentageOfTotal"


class WorkType(str, Enum):
    REGULAR = "regular"
    HOLIDAY = "holiday"
    NIGHT_SHIFT = "nightShift"


class ValidationErrorCode(str, Enum):
    INVALID_CUSTOM_RATE = "InvalidCustomRate"
    INVALID_BASIC_SALARY = "InvalidBasicSalary"
    INVALID_TOTAL_SALARY = "InvalidTotalSalary"
    INVALID_OVERTIME_HOURS = "InvalidOvertimeHours"
    INVALID_DAILY_WORK_HOURS = "InvalidDailyWorkHours"


class NotificationKind(str, Enum):
    ERROR = "error"
    SUCCESS = "success"


# 시급 산정 방식: mode 값으로 구분되는 tagged union
class CustomRate(BaseModel):
    mode: Literal["customRate"] = "customRate"
    customHourlyRate: Optional[float] = None


class BasicSalary(BaseModel):
    mode: Literal["basicSalary"] = "basicSalary"
    basicSalary: Optional[float] = None


class TotalSalary(BaseModel):
    mode: Literal["totalSalary"] = "totalSalary"
    totalSalary: Optional[float] = None


class PercentageOfTotal(BaseModel):
    mode: Literal["percentageOfTotal"] = "percentageOfTotal"
    totalSalary: Optional[float] = None
    percentageOfTotal: int = Field(100, ge=1, le=100)


RateBasis = Annotated[
    Union[CustomRate, BasicSalary, TotalSalary, PercentageOfTotal],
    Field(discriminator="mode"),
]


class CalculationInput(BaseModel):
    rate: RateBasis
    dailyWorkHours: Optional[float] = 8  # 보통 6 또는 8
    overtimeHours: Optional[float] = None
    workType: WorkType = WorkType.REGULAR

    @property
    def rateMode(self) -> RateMode:
        return RateMode(self.rate.mode)


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    regularHourlyRate: float
    overtimeHourlyRate: float
    totalOvertimeAmount: float


class ValidationError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ValidationErrorCode
    field: str
    message: str


class Notification(BaseModel):
    kind: NotificationKind
    message: str


class CalculationDisplay(BaseModel):
    regularHourlyRate: str
    overtimeHourlyRate: str
    overtimeHours: str
    totalOvertimeAmount: str


class CalculationResponse(BaseModel):
    result: CalculationResult
    display: CalculationDisplay
    notifications: List[Notification]


class ValidationFailureResponse(BaseModel):
    errors: List[ValidationError]
    notifications: List[Notification]


class OvertimeInfo(BaseModel):
    daysPerMonth: int
    multipliers: Dict[WorkType, float]
    formula: List[str]
    example: CalculationDisplay
