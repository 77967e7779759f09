"""Constants for the eightsleep library."""

from enum import Enum, IntEnum

MIN_TEMP_C = 10.0
MAX_TEMP_C = 45.1
# One degree Fahrenheit, so every displayed step survives a trip through a level.
MIN_STEP = 0.55556
TEMPERATURE_TOLERANCE = 0.55

MIN_LEVEL = -100
MAX_LEVEL = 100

# (level, fahrenheit) anchors of the Pod's heating/cooling curve.
LEVEL_CALIBRATION: tuple[tuple[int, float], ...] = (
    (-100, 50.0),
    (-75, 55.0),
    (-50, 62.0),
    (-25, 70.0),
    (0, 81.0),
    (25, 90.0),
    (50, 97.0),
    (75, 104.0),
    (100, 113.0),
)

CLIENT_API_URL = "https://client-api.8slp.net/v1"
APP_API_URL = "https://app-api.8slp.net/v1"
USER_AGENT = "okhttp/4.9.3"

REQUEST_TIMEOUT = 10
SESSION_REFRESH_BUFFER = 60

MY_BED_NAME = "My Bed"
GUEST_BED_NAME = "Guest Bed"


class Side(str, Enum):
    """Physical halves of the bed."""

    LEFT = "left"
    RIGHT = "right"


class TargetMode(IntEnum):
    """Target heating/cooling state understood by the thermostat."""

    OFF = 0
    AUTO = 3


class CurrentMode(IntEnum):
    """Displayed heating/cooling state. OFF doubles as idle."""

    OFF = 0
    HEAT = 1
    COOL = 2


class TemperatureDisplayUnits(IntEnum):
    CELSIUS = 0
    FAHRENHEIT = 1


class PowerStateType(str, Enum):
    """Values of the `currentState.type` field of the user temperature API."""

    OFF = "off"
    SMART = "smart"
