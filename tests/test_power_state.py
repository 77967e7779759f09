from eightsleep.adapter.power_state import PowerState


def test_encode():
    assert PowerState(True).encode() == {"type": "smart"}
    assert PowerState(False).encode() == {"type": "off"}


def test_decode():
    assert PowerState.decode({"type": "smart"}) == PowerState(True)
    assert PowerState.decode({"type": "smart:bedtime"}) == PowerState(True)
    assert PowerState.decode({"type": "off"}) == PowerState(False)


def test_decode_missing_type():
    assert PowerState.decode({}) == PowerState(False)
