from enum import Enum

SERVICE_NAME = "solar-energy-backend"

DEFAULT_SOLAR_UNIT_SERIAL = "SU-0001"
DEFAULT_ENERGY_CRON_SCHEDULE = "* * * * *"
DEFAULT_INTERVAL_HOURS = 2

ENERGY_GENERATION_QUEUE = "energy_generation"


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
