"""Discovery topics and the compact JSON configuration payloads sent over MQTT."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .dictionary import (
    FALSE,
    JSON_DATA_PREFIX,
    JSON_DATA_SUFFIX,
    JSON_ESCAPE_CHAR,
    JSON_PROPERTIES_SEPARATOR,
    JSON_PROPERTY_PREFIX,
    JSON_PROPERTY_SUFFIX,
    SLASH,
    TRUE,
    Property,
    Topic,
)
from .numeric import Numeric
from .serializer_array import SerializerArray


class EntryType(Enum):
    """Kind of an entry of the serialized object."""

    PROPERTY = 1
    TOPIC = 2
    FLAG = 3


class FlagType(Enum):
    """Special entries that expand into larger parts of the payload."""

    WITH_DEVICE = 1
    WITH_AVAILABILITY = 2


class PropertyValueType(Enum):
    """The data type of a property's value."""

    STRING = 1
    BOOL = 2
    NUMBER = 3
    ARRAY = 4


@dataclass
class SerializerEntry:
    """A single entry of the serialized object."""

    type: EntryType
    property: str | None = None
    value: Any = None
    subtype: PropertyValueType | FlagType | None = None


@dataclass
class TopicContext:
    """The prefixes and device identifier that topics are built from."""

    discovery_prefix: str | None = None
    data_prefix: str | None = None
    device_id: str | None = None


def config_topic(context: TopicContext, component: object, object_id: str) -> str:
    """Return ``[discovery prefix]/[component]/[device ID]/[object ID]/config``."""
    if (
        component is None
        or object_id is None
        or context is None
        or context.discovery_prefix is None
        or context.device_id is None
    ):
        raise ValueError("config topic needs a discovery prefix, device ID, component and object ID")
    return SLASH.join(
        (context.discovery_prefix, str(component), context.device_id, object_id, str(Topic.CONFIG))
    )


def data_topic(context: TopicContext, object_id: str | None, topic: object) -> str:
    """Return ``[data prefix]/[device ID]/[object ID]/[topic]``; the object ID may be omitted."""
    if (
        topic is None
        or context is None
        or context.data_prefix is None
        or context.device_id is None
    ):
        raise ValueError("data topic needs a data prefix, device ID and topic name")
    parts = [context.data_prefix, context.device_id]
    if object_id is not None:
        parts.append(object_id)
    parts.append(str(topic))
    return SLASH.join(parts)


def compare_data_topics(
    context: TopicContext, actual_topic: str | None, object_id: str | None, topic: object
) -> bool:
    """Return True if ``actual_topic`` is the data topic of ``object_id`` and ``topic``."""
    if actual_topic is None:
        return False
    try:
        expected = data_topic(context, object_id, topic)
    except ValueError:
        return False
    return actual_topic == expected


def _infer_value_type(value: Any) -> PropertyValueType:
    if isinstance(value, bool):
        return PropertyValueType.BOOL
    if isinstance(value, str):
        return PropertyValueType.STRING
    if isinstance(value, Numeric):
        return PropertyValueType.NUMBER
    if isinstance(value, SerializerArray):
        return PropertyValueType.ARRAY
    raise TypeError(f"unsupported property value: {type(value).__name__}")


def _quoted(text: str) -> str:
    return f"{JSON_ESCAPE_CHAR}{text}{JSON_ESCAPE_CHAR}"


def _key(name: str) -> str:
    return f"{JSON_PROPERTY_PREFIX}{name}{JSON_PROPERTY_SUFFIX}"


class Serializer:
    """Builds the JSON configuration of a device type or a device.

    ``object_id`` is the unique ID of the owning device type; it is ``None``
    for the serializer of the device itself. The number of entries is bounded
    by ``max_entries``.
    """

    def __init__(
        self,
        context: TopicContext | None,
        object_id: str | None = None,
        max_entries: int = 0,
    ) -> None:
        if max_entries < 0:
            raise ValueError("max_entries must not be negative")
        self._context = context
        self._object_id = object_id
        self._max_entries = max_entries
        self._entries: list[SerializerEntry] = []

    @property
    def object_id(self) -> str | None:
        """The unique ID of the owning device type."""
        return self._object_id

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SerializerEntry]:
        return iter(self._entries)

    def _add_entry(self, entry: SerializerEntry) -> None:
        if len(self._entries) >= self._max_entries:
            raise OverflowError(f"serializer is full ({self._max_entries} entries)")
        self._entries.append(entry)

    def set(
        self,
        prop: object,
        value: Any,
        value_type: PropertyValueType | None = None,
    ) -> None:
        """Add a property; a missing name or value is ignored.

        Without ``value_type`` the type is taken from the value.
        """
        if prop is None or value is None:
            return
        if value_type is None:
            value_type = _infer_value_type(value)
        self._add_entry(
            SerializerEntry(EntryType.PROPERTY, str(prop), value, value_type)
        )

    def add_device(self, device_serializer: Serializer) -> None:
        """Add the ``dev`` entry holding the serialized device."""
        if device_serializer is None:
            raise ValueError("device serializer is required")
        self._add_entry(
            SerializerEntry(
                EntryType.FLAG, str(Property.DEVICE), device_serializer, FlagType.WITH_DEVICE
            )
        )

    def add_availability(self, shared_topic: str | None = None, configured: bool = False) -> None:
        """Add the availability topic.

        A shared topic of the device is used as is; otherwise, if the device
        type has its own availability configured, its data topic is used.
        With neither, nothing is added.
        """
        if shared_topic is None and not configured:
            return
        self._add_entry(
            SerializerEntry(
                EntryType.TOPIC, str(Topic.AVAILABILITY), shared_topic, FlagType.WITH_AVAILABILITY
            )
        )

    def topic(self, name: object) -> None:
        """Add a data topic of the owning device type; ignored without one."""
        if self._object_id is None or name is None:
            return
        self._add_entry(SerializerEntry(EntryType.TOPIC, str(name)))

    def calculate_size(self) -> int:
        """Return the length of the serialized object."""
        return len(self.serialize())

    def serialize(self) -> str:
        """Return the object as JSON text."""
        return "".join(self._chunks())

    def flush(self, write: Callable[[str], Any]) -> None:
        """Pass the serialized object to ``write`` piece by piece.

        Nothing is written if the object cannot be serialized.
        """
        for chunk in list(self._chunks()):
            write(chunk)

    def _chunks(self) -> Iterator[str]:
        if self._object_id is not None and (
            self._context is None or self._context.device_id is None
        ):
            raise ValueError("a device is required to serialize a device type")
        yield JSON_DATA_PREFIX
        for index, entry in enumerate(self._entries):
            if index:
                yield JSON_PROPERTIES_SEPARATOR
            yield from self._entry_chunks(entry)
        yield JSON_DATA_SUFFIX

    def _entry_chunks(self, entry: SerializerEntry) -> Iterator[str]:
        if entry.type is EntryType.PROPERTY:
            yield _key(entry.property)
            yield self._property_value(entry)
        elif entry.type is EntryType.TOPIC:
            yield _key(entry.property)
            yield _quoted(self._topic_value(entry))
        elif entry.type is EntryType.FLAG:
            yield _key(entry.property)
            yield entry.value.serialize()

    @staticmethod
    def _property_value(entry: SerializerEntry) -> str:
        value = entry.value
        if entry.subtype is PropertyValueType.STRING:
            return _quoted(str(value))
        if entry.subtype is PropertyValueType.BOOL:
            return TRUE if value else FALSE
        if entry.subtype is PropertyValueType.NUMBER:
            return value.to_str()
        if entry.subtype is PropertyValueType.ARRAY:
            return value.serialize()
        raise ValueError(f"unknown property value type: {entry.subtype!r}")

    def _topic_value(self, entry: SerializerEntry) -> str:
        if entry.value is not None:
            return str(entry.value)
        if self._object_id is None:
            raise ValueError("a device type is required to build its data topic")
        return data_topic(self._context, self._object_id, entry.property)