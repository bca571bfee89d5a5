import os
import sys
import json
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file in project root
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")


class Config:
    """Configuration management for the hotel tools."""

    # Amadeus client credentials (client_credentials grant)
    AMADEUS_API_KEY = os.getenv("AMADEUS_API_KEY") or os.getenv(
        "AMADEUS_FOR_DEVELOPERS_S_PUBLIC_WORKSPACE_API_KEY"
    )
    AMADEUS_API_SECRET = os.getenv("AMADEUS_API_SECRET") or os.getenv("API_secret")

    AMADEUS_BASE_URL = os.getenv("AMADEUS_BASE_URL", "https://test.api.amadeus.com")
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "15.0"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls, stream=None):
        """Check for missing critical keys."""
        missing = []
        if not cls.AMADEUS_API_KEY:
            missing.append("AMADEUS_API_KEY")
        if not cls.AMADEUS_API_SECRET:
            missing.append("AMADEUS_API_SECRET")

        if missing:
            print(f"Warning: Missing keys: {', '.join(missing)}", file=stream)
            print("Please create a .env file based on .env.example", file=stream)
            return False
        return True


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
        }
        if hasattr(record, "tool"):
            log_record["tool"] = record.tool
        if hasattr(record, "request_id"):
            log_record["request_id"] = record.request_id
        return json.dumps(log_record)


def setup_logging(level=None, stream=None):
    """Configure structured JSON logging."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(level or Config.LOG_LEVEL)
    # Remove existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
