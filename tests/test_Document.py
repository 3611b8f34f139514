import pytest

# The things we're testing
from musicxml21.partwise import *

# Test utilities
from tests.Utilities import *

def test_ScorePart_default_midi_instrument():
    scorePart = ScorePart('P2', 'Violin')
    assert scorePart.midiInstrument == MidiInstrument(partId='P2')
    elem = scorePart.toElement()
    assert elem.get('id') == 'P2'
    assert childTags(elem) == ['part-name', 'midi-instrument']
    assert elem.find('midi-instrument').get('id') == 'P2-I1'

def test_ScorePart_child_order():
    scorePart = ScorePart(
        'P1', 'Clarinet', abbreviation='Cl.',
        scoreInstrument=ScoreInstrument('P1', 'Clarinet'),
        midiDevice=MidiDevice('P1', 1),
        midiInstrument=MidiInstrument(1, 72, 100, 0, 'P1'),
    )
    elem = scorePart.toElement()
    assert childTags(elem) == [
        'part-name', 'part-abbreviation', 'score-instrument', 'midi-device', 'midi-instrument'
    ]
    assert ScorePart.fromElement(elem) == scorePart

def test_ScorePart_without_midi_instrument():
    scorePart = ScorePart.fromElement(element(
        '<score-part id="P1"><part-name>Flute</part-name></score-part>'
    ))
    assert scorePart.midiInstrument == MidiInstrument(partId='P1')
    assert scorePart == ScorePart('P1', 'Flute')

def test_ScorePart_name_keeps_spaces():
    scorePart = ScorePart('P1', 'Flute 1 ', abbreviation=' Fl.')
    assert ScorePart.fromElement(scorePart.toElement()) == scorePart

def test_ScorePart_missing_fields():
    with pytest.raises(MissingRequiredField):
        ScorePart.fromElement(element('<score-part id="P1"/>'))
    with pytest.raises(MissingRequiredField):
        ScorePart.fromElement(element('<score-part><part-name>Flute</part-name>'
            '<midi-instrument id="P1-I1"><midi-channel>1</midi-channel>'
            '<midi-program>1</midi-program><volume>100</volume><pan>0</pan>'
            '</midi-instrument></score-part>'))

def test_PartList_order_and_lookup():
    partList = PartList([ScorePart('P1', 'Flute'), ScorePart('P2', 'Oboe')])
    assert isinstance(partList.scoreParts, tuple)
    assert partList.partIds == ['P1', 'P2']
    assert partList.scorePartFor('P2').name == 'Oboe'
    assert partList.scorePartFor('P3') is None

    elem = partList.toElement()
    assert [sp.get('id') for sp in elem] == ['P1', 'P2']
    assert PartList.fromElement(elem) == partList

def test_Measure_round_trip():
    measure = Measure(
        attributes=Attributes(divisions=2, key=Key(1), time=Time(2, 4)),
        notes=[Note(pitch=Pitch(67), duration=2), Note(rest=True, duration=2)],
        number='7',
    )
    elem = measure.toElement()
    assert elem.get('number') == '7'
    assert childTags(elem) == ['attributes', 'note', 'note']
    assert Measure.fromElement(elem) == measure

def test_Measure_without_attributes():
    measure = Measure.fromElement(element(
        '<measure number="2"><note><rest/><duration>4</duration></note></measure>'
    ))
    assert measure.attributes is None
    assert len(measure.notes) == 1

def test_Measure_skips_unsupported_elements():
    measure = Measure.fromElement(element(
        '<measure number="1"><note><rest/><duration>1</duration></note>'
        '<backup><duration>1</duration></backup><barline/>'
        '<note><pitch><step>D</step><octave>5</octave></pitch><duration>1</duration></note>'
        '</measure>'
    ))
    assert [n.isRest for n in measure.notes] == [True, False]

def test_Part_numbers_measures():
    part = Part('P1', [Measure(), Measure(number='2a'), Measure()])
    assert [m.number for m in part.measures] == ['1', '2a', '3']

def test_Part_missing_id():
    with pytest.raises(MissingRequiredField):
        Part.fromElement(element('<part><measure number="1"/></part>'))

def test_Part_attributesInEffect():
    a1 = Attributes(divisions=1, key=Key(0), time=Time())
    a3 = Attributes(divisions=2, key=Key(2), time=Time(3, 4))
    part = Part('P1', [
        Measure(),
        Measure(attributes=a1),
        Measure(),
        Measure(attributes=a3),
        Measure(),
    ])
    assert part.attributesInEffect() == [None, a1, a1, a3, a3]
    # the records themselves are left alone
    assert part.measures[2].attributes is None

def test_Score_unmatchedPartIds():
    score = Score(
        partList=PartList([ScorePart('P1', 'Flute'), ScorePart('P2', 'Oboe')]),
        parts=[Part('P1'), Part('P3')],
    )
    assert score.unmatchedPartIds() == ['P2', 'P3']
    assert score.partFor('P3').partId == 'P3'
    assert score.partFor('P2') is None

def test_Score_toElement():
    score = makeSimpleScore()
    elem = score.toElement()
    assert elem.tag == 'score-partwise'
    assert elem.get('version') == '4.0'
    assert childTags(elem) == ['part-list', 'part']

def test_Score_round_trip():
    score = makeSimpleScore()
    again = Score.fromElement(score.toElement())
    assert again == score
    assert again.parts[0].measures[1].notes[0].rest.measureRest

def test_Score_toElement_is_not_cached():
    score = makeSimpleScore()
    first = score.toElement()
    first.find('part').set('id', 'changed')
    assert score.toElement().find('part').get('id') == 'P1'

def test_Score_missing_part_list():
    with pytest.raises(MissingRequiredField):
        Score.fromElement(element('<score-partwise><part id="P1"/></score-partwise>'))
