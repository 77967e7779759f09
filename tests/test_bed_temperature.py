import pytest

from eightsleep.adapter.bed_temperature import BedTemperature
from eightsleep.exceptions import MappingOutOfRangeException


def test_encode_valid_temperature():
    assert BedTemperature._encode(45.0) == 100
    assert BedTemperature._encode(10.0) == -100


def test_decode_valid_level():
    assert BedTemperature._decode(100) == 45.0
    assert BedTemperature._decode(-100) == 10.0


def test_round_trip_consistency():
    temperature = 23.89
    encoded = BedTemperature._encode(temperature)
    decoded = BedTemperature._decode(encoded)
    assert decoded == temperature


def test_encode_temperature_out_of_range_low():
    with pytest.raises(MappingOutOfRangeException):
        BedTemperature(5.0).encode()


def test_encode_temperature_out_of_range_high():
    with pytest.raises(MappingOutOfRangeException):
        BedTemperature(50.0).encode()
