from decimal import Decimal
from typing import Optional

from schemas import CalculationDisplay, CalculationResult

from overtime import settings


def format_amount(value: float, currency: Optional[str] = None) -> str:
    # 표시용으로만 소수점 2자리 반올림
    label = settings.CURRENCY_LABEL if currency is None else currency
    return f"{value:.2f} {label}".rstrip()


def format_hours(hours: float) -> str:
    # 지수 표기 없이, 입력한 자릿수 그대로 표시
    text = format(Decimal(str(hours)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_result(result: CalculationResult, overtime_hours: float, currency: Optional[str] = None) -> CalculationDisplay:
    return CalculationDisplay(
        regularHourlyRate=format_amount(result.regularHourlyRate, currency),
        overtimeHourlyRate=format_amount(result.overtimeHourlyRate, currency),
        overtimeHours=format_hours(overtime_hours),
        totalOvertimeAmount=format_amount(result.totalOvertimeAmount, currency),
    )
