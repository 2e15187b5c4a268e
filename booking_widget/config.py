"""
Widget settings, read from the environment (and a local .env file if present).
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


class Settings:
    # Remote hotel API
    API_URL = os.getenv("API_URL", "http://localhost:8000")

    # None means requests wait as long as the server takes
    REQUEST_TIMEOUT = _optional_float(os.getenv("REQUEST_TIMEOUT"))

    # Notification banner
    NOTIFICATION_SECONDS = float(os.getenv("NOTIFICATION_SECONDS", "3"))


settings = Settings()
