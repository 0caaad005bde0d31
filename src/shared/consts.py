from enum import Enum

DEFAULT_PREDICTION_SERVICE_URL = "http://localhost:8001"
DEFAULT_PREDICTION_TIMEOUT_SECONDS = 20.0
NOISY_LOGGERS = ("httpx", "httpcore")


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
