import os

from dotenv import load_dotenv

# .env 파일을 불러와서 환경변수 등록
load_dotenv()

SUPPORTED_LOCALES = ("ar", "en")
DEFAULT_LOCALE = "ar"


def parse_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def resolve_locale(raw: str) -> str:
    locale = raw.strip().lower()
    return locale if locale in SUPPORTED_LOCALES else DEFAULT_LOCALE


ALLOWED_ORIGINS = parse_origins(os.getenv("ALLOWED_ORIGINS", "*"))
MESSAGE_LOCALE = resolve_locale(os.getenv("MESSAGE_LOCALE", DEFAULT_LOCALE))
CURRENCY_LABEL = os.getenv("CURRENCY_LABEL", "ريال")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"
