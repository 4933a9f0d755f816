"""Fixed strings used in Home Assistant MQTT discovery payloads and topics."""

from enum import Enum


class _StrEnum(str, Enum):
    """String enum whose ``str()`` is the wire value."""

    def __str__(self) -> str:
        return self.value


class Component(_StrEnum):
    """Home Assistant component names used in discovery topics."""

    BINARY_SENSOR = "binary_sensor"
    BUTTON = "button"
    CAMERA = "camera"
    COVER = "cover"
    DEVICE_TRACKER = "device_tracker"
    DEVICE_AUTOMATION = "device_automation"
    LOCK = "lock"
    NUMBER = "number"
    SELECT = "select"
    SENSOR = "sensor"
    SWITCH = "switch"
    TAG = "tag"
    SCENE = "scene"
    FAN = "fan"
    LIGHT = "light"
    CLIMATE = "climate"


class Property(_StrEnum):
    """Abbreviated property keys of a discovery configuration."""

    DEVICE_IDENTIFIERS = "ids"
    DEVICE_MANUFACTURER = "mf"
    DEVICE_MODEL = "mdl"
    DEVICE_SOFTWARE_VERSION = "sw"
    NAME = "name"
    UNIQUE_ID = "uniq_id"
    DEVICE = "dev"
    DEVICE_CLASS = "dev_cla"
    STATE_CLASS = "state_class"
    ICON = "ic"
    RETAIN = "ret"
    SOURCE_TYPE = "src_type"
    ENCODING = "e"
    OPTIMISTIC = "opt"
    AUTOMATION_TYPE = "atype"
    TYPE = "type"
    SUBTYPE = "stype"
    FORCE_UPDATE = "frc_upd"
    UNIT_OF_MEASUREMENT = "unit_of_meas"
    VALUE_TEMPLATE = "val_tpl"
    OPTIONS = "options"
    MIN = "min"
    MAX = "max"
    STEP = "step"
    MODE = "mode"
    COMMAND_TEMPLATE = "cmd_tpl"
    SPEED_RANGE_MAX = "spd_rng_max"
    SPEED_RANGE_MIN = "spd_rng_min"
    BRIGHTNESS_SCALE = "bri_scl"
    MIN_MIREDS = "min_mirs"
    MAX_MIREDS = "max_mirs"
    TEMPERATURE_UNIT = "temp_unit"
    MIN_TEMP = "min_temp"
    MAX_TEMP = "max_temp"
    TEMP_STEP = "temp_step"
    FAN_MODES = "fan_modes"
    SWING_MODES = "swing_modes"
    MODES = "modes"
    TEMPERATURE_COMMAND_TEMPLATE = "temp_cmd_tpl"
    PAYLOAD_ON = "pl_on"


class Topic(_StrEnum):
    """Topic names and their abbreviated configuration keys."""

    CONFIG = "config"
    AVAILABILITY = "avty_t"
    TOPIC = "t"
    STATE = "stat_t"
    COMMAND = "cmd_t"
    POSITION = "pos_t"
    PERCENTAGE_STATE = "pct_stat_t"
    PERCENTAGE_COMMAND = "pct_cmd_t"
    BRIGHTNESS_COMMAND = "bri_cmd_t"
    BRIGHTNESS_STATE = "bri_stat_t"
    COLOR_TEMPERATURE_COMMAND = "clr_temp_cmd_t"
    COLOR_TEMPERATURE_STATE = "clr_temp_stat_t"
    CURRENT_TEMPERATURE = "curr_temp_t"
    ACTION = "act_t"
    AUX_COMMAND = "aux_cmd_t"
    AUX_STATE = "aux_stat_t"
    POWER_COMMAND = "pow_cmd_t"
    FAN_MODE_COMMAND = "fan_mode_cmd_t"
    FAN_MODE_STATE = "fan_mode_stat_t"
    SWING_MODE_COMMAND = "swing_mode_cmd_t"
    SWING_MODE_STATE = "swing_mode_stat_t"
    MODE_COMMAND = "mode_cmd_t"
    MODE_STATE = "mode_stat_t"
    TEMPERATURE_COMMAND = "temp_cmd_t"
    TEMPERATURE_STATE = "temp_stat_t"
    RGB_COMMAND = "rgb_cmd_t"
    RGB_STATE = "rgb_stat_t"


class CoverState(_StrEnum):
    """States reported by a cover."""

    CLOSED = "closed"
    CLOSING = "closing"
    OPEN = "open"
    OPENING = "opening"
    STOPPED = "stopped"


class Command(_StrEnum):
    """Commands received by covers and locks."""

    OPEN = "OPEN"
    CLOSE = "CLOSE"
    STOP = "STOP"
    LOCK = "LOCK"
    UNLOCK = "UNLOCK"


class SourceType(_StrEnum):
    """Source types of a device tracker."""

    GPS = "gps"
    ROUTER = "router"
    BLUETOOTH = "bluetooth"
    BLUETOOTH_LE = "bluetooth_le"


class TriggerType(_StrEnum):
    """Built-in device trigger types."""

    BUTTON_SHORT_PRESS = "button_short_press"
    BUTTON_SHORT_RELEASE = "button_short_release"
    BUTTON_LONG_PRESS = "button_long_press"
    BUTTON_LONG_RELEASE = "button_long_release"
    BUTTON_DOUBLE_PRESS = "button_double_press"
    BUTTON_TRIPLE_PRESS = "button_triple_press"
    BUTTON_QUADRUPLE_PRESS = "button_quadruple_press"
    BUTTON_QUINTUPLE_PRESS = "button_quintuple_press"


class TriggerSubtype(_StrEnum):
    """Built-in device trigger subtypes."""

    TURN_ON = "turn_on"
    TURN_OFF = "turn_off"
    BUTTON_1 = "button_1"
    BUTTON_2 = "button_2"
    BUTTON_3 = "button_3"
    BUTTON_4 = "button_4"
    BUTTON_5 = "button_5"
    BUTTON_6 = "button_6"


class HVACAction(_StrEnum):
    """Current action of an HVAC device."""

    OFF = "off"
    HEATING = "heating"
    COOLING = "cooling"
    DRYING = "drying"
    IDLE = "idle"
    FAN = "fan"


class FanMode(_StrEnum):
    """Fan modes of an HVAC device."""

    AUTO = "auto"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SwingMode(_StrEnum):
    """Swing modes of an HVAC device."""

    ON = "on"
    OFF = "off"


class HVACMode(_StrEnum):
    """Operating modes of an HVAC device."""

    AUTO = "auto"
    OFF = "off"
    COOL = "cool"
    HEAT = "heat"
    DRY = "dry"
    FAN_ONLY = "fan_only"


class TemperatureUnit(_StrEnum):
    """Temperature units of an HVAC device."""

    C = "C"
    F = "F"


# JSON and topic decorators
SLASH = "/"
JSON_DATA_PREFIX = "{"
JSON_DATA_SUFFIX = "}"
JSON_PROPERTY_PREFIX = '"'
JSON_PROPERTY_SUFFIX = '":'
JSON_ESCAPE_CHAR = '"'
JSON_PROPERTIES_SEPARATOR = ","
JSON_ARRAY_PREFIX = "["
JSON_ARRAY_SUFFIX = "]"
UNDERSCORE = "_"

# Miscellaneous payloads
ONLINE = "online"
OFFLINE = "offline"
STATE_ON = "ON"
STATE_OFF = "OFF"
STATE_LOCKED = "LOCKED"
STATE_UNLOCKED = "UNLOCKED"
STATE_NONE = "None"
TRUE = "true"
FALSE = "false"
HOME = "home"
NOT_HOME = "not_home"
TRIGGER = "trigger"
MODE_BOX = "box"
MODE_SLIDER = "slider"
ENCODING_BASE64 = "b64"

HEX_MAP = "0123456789abcdef"

# Value templates that turn a float into the integer base value of a given precision
VALUE_TEMPLATE_FLOAT_P1 = "{{int(float(value)*10**1)}}"
VALUE_TEMPLATE_FLOAT_P2 = "{{int(float(value)*10**2)}}"
VALUE_TEMPLATE_FLOAT_P3 = "{{int(float(value)*10**3)}}"