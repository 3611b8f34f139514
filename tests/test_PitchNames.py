import pytest

# The things we're testing
from musicxml21.partwise import nameFromPitch
from musicxml21.partwise import pitchFromName

def test_nameFromPitch_middle_c():
    assert nameFromPitch(60) == ('C', 0, 4)

def test_nameFromPitch_black_key_is_sharp():
    assert nameFromPitch(61) == ('C', 1, 4)
    assert nameFromPitch(70) == ('A', 1, 4)
    for midi in (61, 63, 66, 68, 70):
        step, alter, _ = nameFromPitch(midi)
        assert alter == 1
        assert len(step) == 1

def test_nameFromPitch_lowest():
    assert nameFromPitch(0) == ('C', 0, -1)
    assert nameFromPitch(11) == ('B', 0, -1)

def test_nameFromPitch_is_total():
    # no failure path, even outside the MIDI range
    assert nameFromPitch(-1) == ('B', 0, -2)
    assert nameFromPitch(128) == ('G', 1, 9)

@pytest.mark.parametrize('midi', [-13, 0, 5, 59, 60, 61, 100, 127])
def test_nameFromPitch_octave_increases_by_one_per_twelve(midi):
    assert nameFromPitch(midi + 12)[2] == nameFromPitch(midi)[2] + 1
    assert nameFromPitch(midi + 12)[:2] == nameFromPitch(midi)[:2]

def test_pitchFromName_inverts_nameFromPitch():
    for midi in range(0, 128):
        assert pitchFromName(*nameFromPitch(midi)) == midi

def test_pitchFromName_flat_spelling():
    assert pitchFromName('E', -1, 4) == 63
    assert pitchFromName('C', -1, 4) == 59
    assert pitchFromName('B', 1, 3) == 60
