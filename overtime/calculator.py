"""
Overtime pay under the Saudi labor system.

regular hourly rate = monthly base / 30 days / daily work hours
overtime hourly rate = regular hourly rate x work type multiplier
total overtime amount = overtime hourly rate x overtime hours
"""

import logging
import math
from typing import List, Optional

from schemas import (
    BasicSalary,
    CalculationInput,
    CalculationResult,
    CustomRate,
    PercentageOfTotal,
    TotalSalary,
    ValidationError,
    ValidationErrorCode,
    WorkType,
)

from overtime.messages import error_message

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30

# 입력 허용 범위 (이 범위 안에서는 계산 결과가 항상 유한값)
MAX_AMOUNT = 1e12
MAX_OVERTIME_HOURS = 1e6
MIN_DAILY_WORK_HOURS = 1 / 60
MAX_DAILY_WORK_HOURS = 24

# 근무 유형별 할증 배율 (고정값, 사용자 설정 불가)
OVERTIME_MULTIPLIERS = {
    WorkType.REGULAR: 1.5,
    WorkType.HOLIDAY: 2.0,
    WorkType.NIGHT_SHIFT: 1.75,
}


class InvalidCalculationInput(ValueError):
    """calculate() was called with input that did not pass validate()."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        codes = ", ".join(error.code.value for error in errors)
        super().__init__(f"calculation input failed validation: {codes}")


def _in_range(value: Optional[float], upper: float, lower: float = 0.0) -> bool:
    """Finite, above zero and within [lower, upper]."""
    return value is not None and math.isfinite(value) and value > 0 and lower <= value <= upper


def _error(code: ValidationErrorCode, field: str, locale: Optional[str]) -> ValidationError:
    return ValidationError(code=code, field=field, message=error_message(code, locale))


#step1. 입력값 검증

def validate(data: CalculationInput, locale: Optional[str] = None) -> List[ValidationError]:
    """
    Collect every validation failure for the input, in a fixed order.

    An empty list means the input can be passed to calculate(). Never raises.
    """
    errors: List[ValidationError] = []
    rate = data.rate

    if isinstance(rate, CustomRate):
        if not _in_range(rate.customHourlyRate, MAX_AMOUNT):
            errors.append(_error(ValidationErrorCode.INVALID_CUSTOM_RATE, "customHourlyRate", locale))
    elif isinstance(rate, BasicSalary):
        if not _in_range(rate.basicSalary, MAX_AMOUNT):
            errors.append(_error(ValidationErrorCode.INVALID_BASIC_SALARY, "basicSalary", locale))
    elif not _in_range(rate.totalSalary, MAX_AMOUNT):
        errors.append(_error(ValidationErrorCode.INVALID_TOTAL_SALARY, "totalSalary", locale))

    if not _in_range(data.overtimeHours, MAX_OVERTIME_HOURS):
        errors.append(_error(ValidationErrorCode.INVALID_OVERTIME_HOURS, "overtimeHours", locale))

    if not _in_range(data.dailyWorkHours, MAX_DAILY_WORK_HOURS, MIN_DAILY_WORK_HOURS):
        errors.append(_error(ValidationErrorCode.INVALID_DAILY_WORK_HOURS, "dailyWorkHours", locale))

    return errors


#step2. 기본 시급 계산

def monthly_base(rate) -> float:
    """Monthly salary figure the hourly rate is derived from (salary modes only)."""
    if isinstance(rate, BasicSalary):
        return rate.basicSalary
    if isinstance(rate, TotalSalary):
        return rate.totalSalary
    if isinstance(rate, PercentageOfTotal):
        return rate.totalSalary * rate.percentageOfTotal / 100
    raise TypeError(f"{type(rate).__name__} has no monthly base")


def regular_hourly_rate(data: CalculationInput) -> float:
    if isinstance(data.rate, CustomRate):
        return data.rate.customHourlyRate
    return monthly_base(data.rate) / DAYS_PER_MONTH / data.dailyWorkHours


#step3. 할증 배율

def overtime_multiplier(work_type: WorkType) -> float:
    return OVERTIME_MULTIPLIERS[work_type]


#step4. 연장근무 수당 계산

def calculate(data: CalculationInput) -> CalculationResult:
    """
    Compute regular/overtime hourly rates and the total overtime amount.

    The input must already pass validate(); otherwise InvalidCalculationInput
    is raised. No rounding is applied here.
    """
    errors = validate(data)
    if errors:
        raise InvalidCalculationInput(errors)

    logger.debug("Calculating overtime (mode=%s, workType=%s)", data.rateMode.value, data.workType.value)

    regular = regular_hourly_rate(data)
    overtime_rate = regular * overtime_multiplier(data.workType)
    total = overtime_rate * data.overtimeHours

    return CalculationResult(
        regularHourlyRate=regular,
        overtimeHourlyRate=overtime_rate,
        totalOvertimeAmount=total,
    )
