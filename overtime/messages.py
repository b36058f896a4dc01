"""
User-facing messages for validation failures and successful calculations.

Arabic is the reference wording; English is provided for non-Arabic clients.
"""

from schemas import ValidationErrorCode

from overtime import settings

ERROR_MESSAGES = {
    "ar": {
        ValidationErrorCode.INVALID_CUSTOM_RATE: "يرجى إدخال سعر الساعة المخصص بشكل صحيح",
        ValidationErrorCode.INVALID_BASIC_SALARY: "يرجى إدخال الراتب الأساسي بشكل صحيح",
        ValidationErrorCode.INVALID_TOTAL_SALARY: "يرجى إدخال الراتب الإجمالي بشكل صحيح",
        ValidationErrorCode.INVALID_OVERTIME_HOURS: "يرجى إدخال عدد ساعات العمل الإضافية بشكل صحيح",
        ValidationErrorCode.INVALID_DAILY_WORK_HOURS: "يرجى إدخال عدد ساعات العمل اليومية بشكل صحيح",
    },
    "en": {
        ValidationErrorCode.INVALID_CUSTOM_RATE: "Please enter a valid custom hourly rate",
        ValidationErrorCode.INVALID_BASIC_SALARY: "Please enter a valid basic salary",
        ValidationErrorCode.INVALID_TOTAL_SALARY: "Please enter a valid total salary",
        ValidationErrorCode.INVALID_OVERTIME_HOURS: "Please enter a valid number of overtime hours",
        ValidationErrorCode.INVALID_DAILY_WORK_HOURS: "Please enter a valid number of daily work hours",
    },
}

SUCCESS_MESSAGES = {
    "ar": "تم احتساب العمل الإضافي وفقاً لنظام العمل السعودي",
    "en": "Overtime calculated according to the Saudi labor system",
}


def error_message(code: ValidationErrorCode, locale: str | None = None) -> str:
    locale = settings.resolve_locale(locale or settings.MESSAGE_LOCALE)
    return ERROR_MESSAGES[locale][code]


def success_message(locale: str | None = None) -> str:
    locale = settings.resolve_locale(locale or settings.MESSAGE_LOCALE)
    return SUCCESS_MESSAGES[locale]
