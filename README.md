# hadiscovery

Helpers for building Home Assistant MQTT discovery messages: topic names,
fixed-precision numbers and compact JSON configuration payloads that use
Home Assistant's abbreviated keys.

## Installation

```
pip install hadiscovery
```

## Modules

- `hadiscovery.dictionary`: the string vocabulary as string enums whose
  `str()` is the wire value: `Component`, `Property`, `Topic`, `CoverState`,
  `Command`, `SourceType`, `TriggerType`, `TriggerSubtype`, `HVACAction`,
  `FanMode`, `SwingMode`, `HVACMode` and `TemperatureUnit`. It also holds
  plain constants such as `ONLINE`, `OFFLINE`, `STATE_ON`, `STATE_OFF`,
  `HEX_MAP` and the value templates `VALUE_TEMPLATE_FLOAT_P1` to `_P3`.
- `hadiscovery.utils`: `ends_with(text, suffix)`, which never matches when
  either argument is missing or empty, and `byte_array_to_str(data)`, which
  turns bytes into a lower-case hex string.
- `hadiscovery.numeric`: `Numeric` holds a number as an integer base value
  with a decimal precision of 0 to 3 digits. `Numeric()` with no value is
  unset. `Numeric.from_str` parses an optionally signed run of at most 19
  digits as a base value and returns an unset number for anything else.
  `to_str` formats the number, so a base value of `1234` with precision `1`
  gives `"123.4"`. The `is_*` and `to_*` methods check and convert to the
  fixed-width integer ranges; `to_float` scales back by the precision.
- `hadiscovery.serializer_array`: `SerializerArray(size)` is a list of at
  most `size` strings that serializes to a JSON array; `add` raises
  `OverflowError` when it is full.
- `hadiscovery.serializer`: `config_topic`, `data_topic` and
  `compare_data_topics` build and check topic names from a `TopicContext`
  (discovery prefix, data prefix, device ID); the first two raise
  `ValueError` when a part is missing. `Serializer` collects property
  (`set`), data topic (`topic`), device (`add_device`) and availability
  (`add_availability`) entries, up to `max_entries` of them, and renders
  them as one JSON object.

## Example

```python
from hadiscovery.dictionary import Component, Property, Topic
from hadiscovery.numeric import Numeric
from hadiscovery.serializer import (
    PropertyValueType,
    Serializer,
    TopicContext,
    config_topic,
)

context = TopicContext(
    discovery_prefix="homeassistant",
    data_prefix="aha",
    device_id="demo_device",
)

print(config_topic(context, Component.SENSOR, "temperature"))
# homeassistant/sensor/demo_device/temperature/config

config = Serializer(context, "temperature", 4)
config.set(Property.NAME, "Temperature")
config.set(Property.MIN, Numeric(-10, 1), PropertyValueType.NUMBER)
config.topic(Topic.STATE)
print(config.serialize())
# {"name":"Temperature","min":-10.0,"stat_t":"aha/demo_device/temperature/stat_t"}
```

Without a `value_type`, `set` picks the type from the value: `bool`, `str`,
`Numeric` or `SerializerArray`. String values are quoted but not escaped.

`Serializer.flush(write)` passes the payload in pieces to any callable, such
as the payload writer of an MQTT client. `calculate_size()` gives the payload
length in advance.

## What it does not do

The package only builds topic names and payload text. It has no MQTT client
and does not connect to a broker, publish or subscribe, and it has no
ready-made device types (sensors, switches, lights and so on); the caller
supplies the prefixes, IDs and entries and sends the result itself.