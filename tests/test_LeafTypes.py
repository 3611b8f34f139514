import pytest

# The things we're testing
from musicxml21.partwise import *

# Test utilities
from tests.Utilities import *

def test_Key_toElement():
    elem = Key(fifths=-2).toElement()
    assert elem.tag == 'key'
    assert childTags(elem) == ['fifths']
    assert elem.findtext('fifths') == '-2'

    elem = Key(fifths=3, mode='minor').toElement()
    assert childTags(elem) == ['fifths', 'mode']
    assert elem.findtext('mode') == 'minor'

def test_Key_fromElement():
    key = Key.fromElement(element('<key><fifths> 4 </fifths><mode>dorian</mode></key>'))
    assert key == Key(4, 'dorian')
    key = Key.fromElement(element('<key><fifths>0</fifths></key>'))
    assert key.mode is None

def test_Key_errors():
    with pytest.raises(MissingRequiredField):
        Key.fromElement(element('<key><mode>major</mode></key>'))
    with pytest.raises(MalformedValue):
        Key.fromElement(element('<key><fifths>two</fifths></key>'))
    with pytest.raises(MalformedValue):
        Key(0, 'happy')

def test_Clef_round_trip():
    for clef in (Clef('G', 2), Clef('F', 4), Clef('C', 3), Clef('percussion'),
                 Clef('G', 2, octaveChange=-1)):
        assert Clef.fromElement(clef.toElement()) == clef

def test_Clef_toElement_order():
    elem = Clef('G', 2, octaveChange=-1).toElement()
    assert childTags(elem) == ['sign', 'line', 'clef-octave-change']
    assert childTags(Clef('percussion').toElement()) == ['sign']

def test_Clef_errors():
    with pytest.raises(MalformedValue):
        Clef('X', 2)
    with pytest.raises(MalformedValue):
        Clef('G', 6)
    with pytest.raises(MalformedValue):
        Clef.fromElement(element('<clef><sign>G</sign><line>0</line></clef>'))
    with pytest.raises(MissingRequiredField):
        Clef.fromElement(element('<clef><line>2</line></clef>'))

def test_Time_default_and_signature():
    assert Time() == Time(4, 4)
    assert Time(6, 8).signature == (6, 8)
    elem = Time(3, 2).toElement()
    assert childTags(elem) == ['beats', 'beat-type']
    assert Time.fromElement(elem) == Time(3, 2)

def test_Time_errors():
    with pytest.raises(MissingRequiredField):
        Time.fromElement(element('<time><beats>3</beats></time>'))
    with pytest.raises(MalformedValue):
        Time.fromElement(element('<time><beats>3+2</beats><beat-type>8</beat-type></time>'))
    with pytest.raises(MalformedValue):
        Time(0, 4)

def test_Transpose_toElement():
    elem = Transpose(diatonic=-1, chromatic=-2).toElement()
    assert childTags(elem) == ['diatonic', 'chromatic']
    elem = Transpose(0, 0, octaveChange=-1, double=True).toElement()
    assert childTags(elem) == ['diatonic', 'chromatic', 'octave-change', 'double']

def test_Transpose_fromElement():
    transpose = Transpose.fromElement(element(
        '<transpose><chromatic>-9</chromatic><octave-change>-1</octave-change>'
        '<double/></transpose>'
    ))
    assert transpose == Transpose(diatonic=0, chromatic=-9, octaveChange=-1, double=True)
    with pytest.raises(MissingRequiredField):
        Transpose.fromElement(element('<transpose><diatonic>1</diatonic></transpose>'))

def test_Pitch_from_midi_and_from_name_are_equal():
    assert Pitch(60) == Pitch(step='C', alteration=0, octave=4)
    assert Pitch(61) == Pitch(step='C', alteration=1, octave=4)
    assert Pitch(step='D', octave=2).alteration == 0
    assert Pitch(step='E', alteration=-1, octave=4).midi == 63

def test_Pitch_needs_exactly_one_representation():
    with pytest.raises(AmbiguousOrMissingVariant):
        Pitch(60, step='C', octave=4)
    with pytest.raises(AmbiguousOrMissingVariant):
        Pitch()
    with pytest.raises(AmbiguousOrMissingVariant):
        Pitch(step='C')

def test_Pitch_bad_values():
    with pytest.raises(MalformedValue):
        Pitch(128)
    with pytest.raises(MalformedValue):
        Pitch(step='H', octave=4)

def test_Pitch_toElement():
    elem = Pitch(60).toElement()
    assert childTags(elem) == ['step', 'octave']
    elem = Pitch(step='G', alteration=-0.5, octave=3).toElement()
    assert childTags(elem) == ['step', 'alter', 'octave']
    assert elem.findtext('alter') == '-0.5'
    assert Pitch(66).toElement().findtext('alter') == '1'

def test_Pitch_fromElement():
    CheckPitch(
        Pitch.fromElement(element('<pitch><step>F</step><alter>1</alter><octave>5</octave></pitch>')),
        expectedStep='F', expectedAlteration=1, expectedOctave=5
    )
    CheckPitch(
        Pitch.fromElement(element('<pitch><step>A</step><alter>-0.5</alter><octave>3</octave></pitch>')),
        expectedStep='A', expectedAlteration=-0.5, expectedOctave=3
    )
    with pytest.raises(MissingRequiredField):
        Pitch.fromElement(element('<pitch><step>A</step></pitch>'))
    with pytest.raises(MalformedValue):
        Pitch.fromElement(element('<pitch><step>A</step><octave>high</octave></pitch>'))
    with pytest.raises(MalformedValue):
        Pitch.fromElement(element('<pitch><step>A</step><alter>x</alter><octave>3</octave></pitch>'))

def test_Rest_round_trip():
    for rest in (Rest(), Rest(measureRest=True), Rest(displayStep='B', displayOctave=4)):
        assert Rest.fromElement(rest.toElement()) == rest
    elem = Rest(measureRest=True).toElement()
    assert elem.get('measure') == 'yes'
    assert childTags(elem) == []

def test_Rest_bad_measure_flag():
    with pytest.raises(MalformedValue):
        Rest.fromElement(element('<rest measure="maybe"/>'))
    assert Rest.fromElement(element('<rest measure="no"/>')) == Rest()

def test_Unpitched_round_trip():
    for unpitched in (Unpitched(), Unpitched('E', 4)):
        assert Unpitched.fromElement(unpitched.toElement()) == unpitched
    assert childTags(Unpitched('E', 4).toElement()) == ['display-step', 'display-octave']
