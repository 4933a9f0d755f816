import json

import pytest

from hadiscovery.dictionary import Component, Property, Topic
from hadiscovery.numeric import Numeric
from hadiscovery.serializer import (
    EntryType,
    PropertyValueType,
    Serializer,
    SerializerEntry,
    TopicContext,
    compare_data_topics,
    config_topic,
    data_topic,
)
from hadiscovery.serializer_array import SerializerArray


@pytest.fixture
def ctx():
    return TopicContext(
        discovery_prefix="homeassistant", data_prefix="aha", device_id="testDevice"
    )


def test_config_topic_worked_example(ctx):
    assert (
        config_topic(ctx, Component.BINARY_SENSOR, "uniqueSensor")
        == "homeassistant/binary_sensor/testDevice/uniqueSensor/config"
    )


def test_config_topic_requires_prefix():
    with pytest.raises(ValueError):
        config_topic(TopicContext(device_id="dev"), Component.SENSOR, "obj")


def test_config_topic_requires_object_id(ctx):
    with pytest.raises(ValueError):
        config_topic(ctx, Component.SENSOR, None)


def test_data_topic_with_object_id(ctx):
    assert data_topic(ctx, "uniqueSensor", Topic.STATE) == "aha/testDevice/uniqueSensor/stat_t"


def test_data_topic_without_object_id(ctx):
    result = data_topic(ctx, None, Topic.AVAILABILITY)
    parts = result.split("/")
    assert parts[0] == ctx.data_prefix
    assert parts[1] == ctx.device_id
    assert parts[2] == str(Topic.AVAILABILITY)
    assert len(parts) == 3


def test_data_topic_requires_device():
    with pytest.raises(ValueError):
        data_topic(TopicContext(data_prefix="aha"), "obj", Topic.STATE)


def test_compare_data_topics(ctx):
    actual = data_topic(ctx, "obj", Topic.COMMAND)
    assert compare_data_topics(ctx, actual, "obj", Topic.COMMAND) is True
    assert compare_data_topics(ctx, actual, "other", Topic.COMMAND) is False
    assert compare_data_topics(ctx, actual + "x", "obj", Topic.COMMAND) is False
    assert compare_data_topics(ctx, None, "obj", Topic.COMMAND) is False
    assert compare_data_topics(TopicContext(), actual, "obj", Topic.COMMAND) is False


def test_empty_serializer(ctx):
    serializer = Serializer(ctx, "obj", 0)
    assert serializer.serialize() == "{}"
    assert serializer.calculate_size() == len("{}")


def test_string_property(ctx):
    serializer = Serializer(ctx, "obj", 1)
    serializer.set(Property.NAME, "Sensor")
    assert json.loads(serializer.serialize())[str(Property.NAME)] == "Sensor"


def test_bool_properties(ctx):
    serializer = Serializer(ctx, "obj", 2)
    serializer.set(Property.OPTIMISTIC, True)
    serializer.set(Property.RETAIN, False, PropertyValueType.BOOL)
    parsed = json.loads(serializer.serialize())
    assert parsed[str(Property.OPTIMISTIC)] is True
    assert parsed[str(Property.RETAIN)] is False


def test_number_property(ctx):
    serializer = Serializer(ctx, "obj", 2)
    serializer.set(Property.MIN, Numeric(123, 0))
    serializer.set(Property.MAX, Numeric(-7, 0))
    parsed = json.loads(serializer.serialize())
    assert parsed[str(Property.MIN)] == 123
    assert parsed[str(Property.MAX)] == -7


def test_array_property(ctx):
    options = SerializerArray(2)
    options.add("a")
    options.add("b")
    serializer = Serializer(ctx, "obj", 1)
    serializer.set(Property.OPTIONS, options)
    assert json.loads(serializer.serialize())[str(Property.OPTIONS)] == ["a", "b"]


def test_set_ignores_missing_value(ctx):
    serializer = Serializer(ctx, "obj", 1)
    serializer.set(Property.NAME, None)
    serializer.set(None, "value")
    assert len(serializer) == 0


def test_set_rejects_unsupported_type(ctx):
    serializer = Serializer(ctx, "obj", 1)
    with pytest.raises(TypeError):
        serializer.set(Property.NAME, object())


def test_topic_entry_uses_data_topic(ctx):
    serializer = Serializer(ctx, "obj", 1)
    serializer.topic(Topic.STATE)
    parsed = json.loads(serializer.serialize())
    assert parsed[str(Topic.STATE)] == data_topic(ctx, "obj", Topic.STATE)


def test_topic_ignored_without_object_id(ctx):
    serializer = Serializer(ctx, None, 1)
    serializer.topic(Topic.STATE)
    assert len(serializer) == 0


def test_shared_availability(ctx):
    shared = data_topic(ctx, None, Topic.AVAILABILITY)
    serializer = Serializer(ctx, "obj", 1)
    serializer.add_availability(shared, False)
    assert json.loads(serializer.serialize())[str(Topic.AVAILABILITY)] == shared


def test_own_availability(ctx):
    serializer = Serializer(ctx, "obj", 1)
    serializer.add_availability(None, True)
    parsed = json.loads(serializer.serialize())
    assert parsed[str(Topic.AVAILABILITY)] == data_topic(ctx, "obj", Topic.AVAILABILITY)


def test_availability_not_configured(ctx):
    serializer = Serializer(ctx, "obj", 1)
    serializer.add_availability(None, False)
    assert len(serializer) == 0


def test_device_entry(ctx):
    device = Serializer(ctx, None, 2)
    device.set(Property.DEVICE_IDENTIFIERS, ctx.device_id)
    device.set(Property.DEVICE_MODEL, "model")
    serializer = Serializer(ctx, "obj", 1)
    serializer.add_device(device)
    parsed = json.loads(serializer.serialize())
    assert parsed[str(Property.DEVICE)] == json.loads(device.serialize())
    assert parsed[str(Property.DEVICE)][str(Property.DEVICE_MODEL)] == "model"


def test_add_device_requires_serializer(ctx):
    with pytest.raises(ValueError):
        Serializer(ctx, "obj", 1).add_device(None)


def test_entry_limit(ctx):
    serializer = Serializer(ctx, "obj", 1)
    serializer.set(Property.NAME, "a")
    with pytest.raises(OverflowError):
        serializer.set(Property.ICON, "b")
    assert len(serializer) == 1


def test_order_and_size(ctx):
    serializer = Serializer(ctx, "obj", 3)
    serializer.set(Property.NAME, "n")
    serializer.set(Property.UNIQUE_ID, "obj")
    serializer.topic(Topic.COMMAND)
    text = serializer.serialize()
    assert list(json.loads(text)) == [
        str(Property.NAME),
        str(Property.UNIQUE_ID),
        str(Topic.COMMAND),
    ]
    assert serializer.calculate_size() == len(text)


def test_iteration_yields_entries(ctx):
    serializer = Serializer(ctx, "obj", 1)
    serializer.set(Property.NAME, "n")
    entries = list(serializer)
    assert entries == [
        SerializerEntry(EntryType.PROPERTY, str(Property.NAME), "n", PropertyValueType.STRING)
    ]


def test_flush_writes_serialized_payload(ctx):
    serializer = Serializer(ctx, "obj", 2)
    serializer.set(Property.NAME, "n")
    serializer.topic(Topic.STATE)
    written = []
    serializer.flush(written.append)
    assert "".join(written) == serializer.serialize()
    assert len(written) > 1


def test_flush_without_device_writes_nothing():
    serializer = Serializer(TopicContext(data_prefix="aha"), "obj", 1)
    serializer.set(Property.NAME, "n")
    written = []
    with pytest.raises(ValueError):
        serializer.flush(written.append)
    assert written == []