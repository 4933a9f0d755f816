"""Home Assistant MQTT discovery topics, fixed-precision numbers and JSON configuration payloads."""

__version__ = "0.1.0"

__all__ = ["dictionary", "numeric", "serializer", "serializer_array", "utils"]