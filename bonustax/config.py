"""Application configuration loaded from environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """Centralized application settings."""

    # Server
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "5478"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Individual income tax
    MONTHLY_THRESHOLD: float = float(os.getenv("MONTHLY_THRESHOLD", "5000"))  # 每月起征点

    # Social insurance / housing fund contribution base, as multiples of
    # the city's average salary
    INSURANCE_BASE_FLOOR_RATIO: float = float(os.getenv("INSURANCE_BASE_FLOOR_RATIO", "0.6"))
    INSURANCE_BASE_CAP_RATIO: float = float(os.getenv("INSURANCE_BASE_CAP_RATIO", "3"))

    # Input limits
    MAX_MONTHLY_SALARY: float = float(os.getenv("MAX_MONTHLY_SALARY", "1000000"))

    CURRENCY_DECIMALS: int = 2


settings = Settings()
