"""
Application constants.
"""


class ConfigFile:
    """Configuration file paths."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class IdentityHeader:
    """Headers set by the identity provider in front of the API."""
    USER_ID = "X-User-Id"
    EMAIL = "X-User-Email"
    FIRST_NAME = "X-User-First-Name"
    LAST_NAME = "X-User-Last-Name"
    PROFILE_IMAGE_URL = "X-User-Profile-Image-Url"


# Default emission factors (kg CO2 per unit, ev_factor is a multiplier)
DEFAULT_EMISSION_FACTORS = {
    "cars": 0.18,  # per km
    "trucks": 0.9,  # per km
    "planes": 9000.0,  # per flight-hour at full load
    "forklifts": 4.0,  # per operating hour
    "heating": 0.2,  # per kWh
    "lighting_cooling_it": 0.4,  # per kWh
    "ev_factor": 0.3,
}

KG_PER_TON = 1000

DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 100

DEFAULT_MAX_CONCURRENT_LOOKUPS = 4
