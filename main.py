import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from overtime import settings
from overtime.calculator import DAYS_PER_MONTH, OVERTIME_MULTIPLIERS, calculate, validate
from overtime.formatting import format_result
from overtime.logging_config import setup_logging
from overtime.messages import success_message
from overtime.notifier import CollectingNotifier
from schemas import (  # 🔹 Pydantic 모델 import
    BasicSalary,
    CalculationInput,
    CalculationResponse,
    NotificationKind,
    OvertimeInfo,
    ValidationFailureResponse,
    WorkType,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 서버 시작 시 로깅 설정
    setup_logging()
    logger.info("Application starting up")
    yield
    logger.info("Application shutting down")


app = FastAPI(title="Saudi Overtime Calculator", lifespan=lifespan)

# 🔸 CORS 설정 (ALLOWED_ORIGINS 환경변수, 기본값은 모든 origin 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 안내 탭에 보여주는 예시 (기본급 4000, 하루 8시간, 평일 연장 5시간)
EXAMPLE_INPUT = CalculationInput(
    rate=BasicSalary(basicSalary=4000),
    dailyWorkHours=8,
    overtimeHours=5,
    workType=WorkType.REGULAR,
)

FORMULA = [
    "regularHourlyRate = monthlyBase / 30 / dailyWorkHours",
    "overtimeHourlyRate = regularHourlyRate * multiplier(workType)",
    "totalOvertimeAmount = overtimeHourlyRate * overtimeHours",
]


# 기본 루트 라우터
@app.get("/")
def root():
    return {"message": "Hello, FastAPI!"}


# 연장근무 수당 계산 API (POST 방식)
@app.post(
    "/calculate",
    response_model=CalculationResponse,
    responses={400: {"model": ValidationFailureResponse}},
)
def calculate_overtime(input: CalculationInput):
    """
    사용자가 입력한 급여/시간 정보로 사우디 노동법 기준 연장근무 수당 계산
    """
    notifier = CollectingNotifier()

    errors = validate(input)
    if errors:
        for error in errors:
            notifier.notify(NotificationKind.ERROR, error.message)
        failure = ValidationFailureResponse(errors=errors, notifications=notifier.notifications)
        return JSONResponse(status_code=400, content=failure.model_dump(mode="json"))

    result = calculate(input)
    notifier.notify(NotificationKind.SUCCESS, success_message())
    logger.info(
        "Overtime calculated (mode=%s, workType=%s, total=%.2f)",
        input.rateMode.value,
        input.workType.value,
        result.totalOvertimeAmount,
    )

    return CalculationResponse(
        result=result,
        display=format_result(result, input.overtimeHours),
        notifications=notifier.notifications,
    )


# 계산 방법 안내 API
@app.get("/overtime-info", response_model=OvertimeInfo)
def overtime_info():
    example = calculate(EXAMPLE_INPUT)
    return OvertimeInfo(
        daysPerMonth=DAYS_PER_MONTH,
        multipliers=OVERTIME_MULTIPLIERS,
        formula=FORMULA,
        example=format_result(example, EXAMPLE_INPUT.overtimeHours),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
