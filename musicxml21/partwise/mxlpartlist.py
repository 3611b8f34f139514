# ------------------------------------------------------------------------------
# Name:          mxlpartlist.py
# Purpose:       <score-part> and <part-list>: the per-part header information
#                at the top of a score-partwise document.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from dataclasses import dataclass
from xml.etree.ElementTree import Element

import music21 as m21

from musicxml21.partwise import MxlShared
from musicxml21.partwise import InstrumentIdPolicy
from musicxml21.partwise import DEFAULT_ID_POLICY
from musicxml21.partwise import ScoreInstrument
from musicxml21.partwise import MidiDevice
from musicxml21.partwise import MidiInstrument

environLocal = m21.environment.Environment('musicxml21.partwise.mxlpartlist')

_DUPLICATE_PART_ID = 'Duplicate score-part id "{}" in part-list.'


@dataclass(frozen=True)
class ScorePart:
    '''
    Header information for one part.  Each part corresponds to a track in a
    Standard MIDI Format 1 file.  If midiInstrument is not given, a default
    MidiInstrument for this part is used (also when reading a <score-part>
    without one).
    '''
    partId: str
    name: str
    abbreviation: str | None = None
    scoreInstrument: ScoreInstrument | None = None
    midiDevice: MidiDevice | None = None
    midiInstrument: MidiInstrument | None = None

    def __post_init__(self) -> None:
        if self.midiInstrument is None:
            object.__setattr__(self, 'midiInstrument', MidiInstrument(partId=self.partId))

    def toElement(self, policy: InstrumentIdPolicy = DEFAULT_ID_POLICY) -> Element:
        elem = Element('score-part', {'id': self.partId})
        MxlShared.appendTextElement(elem, 'part-name', self.name)
        if self.abbreviation is not None:
            MxlShared.appendTextElement(elem, 'part-abbreviation', self.abbreviation)
        if self.scoreInstrument is not None:
            elem.append(self.scoreInstrument.toElement(policy))
        if self.midiDevice is not None:
            elem.append(self.midiDevice.toElement(policy))
        if self.midiInstrument is not None:
            elem.append(self.midiInstrument.toElement(policy))
        return elem

    @classmethod
    def fromElement(
        cls,
        elem: Element,
        policy: InstrumentIdPolicy = DEFAULT_ID_POLICY
    ) -> 'ScorePart':
        scoreInstrumentEl: Element | None = MxlShared.findChild(elem, 'score-instrument')
        midiDeviceEl: Element | None = MxlShared.findChild(elem, 'midi-device')
        midiInstrumentEl: Element | None = MxlShared.findChild(elem, 'midi-instrument')

        scoreInstrument: ScoreInstrument | None = None
        if scoreInstrumentEl is not None:
            scoreInstrument = ScoreInstrument.fromElement(scoreInstrumentEl, policy)
        midiDevice: MidiDevice | None = None
        if midiDeviceEl is not None:
            midiDevice = MidiDevice.fromElement(midiDeviceEl, policy)
        # no <midi-instrument> means the default one for this part
        midiInstrument: MidiInstrument | None = None
        if midiInstrumentEl is not None:
            midiInstrument = MidiInstrument.fromElement(midiInstrumentEl, policy)

        return cls(
            partId=MxlShared.requiredAttrib(elem, 'id'),
            name=MxlShared.requiredText(elem, 'part-name', strip=False),
            abbreviation=MxlShared.optionalText(elem, 'part-abbreviation', strip=False),
            scoreInstrument=scoreInstrument,
            midiDevice=midiDevice,
            midiInstrument=midiInstrument,
        )


@dataclass(frozen=True)
class PartList:
    '''
    The ordered list of ScoreParts in a score.  (Part groups are not
    supported.)
    '''
    scoreParts: tuple[ScorePart, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'scoreParts', tuple(self.scoreParts))
        seen: set[str] = set()
        for scorePart in self.scoreParts:
            if scorePart.partId in seen:
                environLocal.warn(_DUPLICATE_PART_ID.format(scorePart.partId))
            seen.add(scorePart.partId)

    @property
    def partIds(self) -> list[str]:
        return [scorePart.partId for scorePart in self.scoreParts]

    def scorePartFor(self, partId: str) -> ScorePart | None:
        for scorePart in self.scoreParts:
            if scorePart.partId == partId:
                return scorePart
        return None

    def toElement(self, policy: InstrumentIdPolicy = DEFAULT_ID_POLICY) -> Element:
        elem = Element('part-list')
        for scorePart in self.scoreParts:
            elem.append(scorePart.toElement(policy))
        return elem

    @classmethod
    def fromElement(
        cls,
        elem: Element,
        policy: InstrumentIdPolicy = DEFAULT_ID_POLICY
    ) -> 'PartList':
        scoreParts: list[ScorePart] = []
        for scorePartEl in elem.iterfind('score-part'):
            scoreParts.append(ScorePart.fromElement(scorePartEl, policy))
        return cls(scoreParts=tuple(scoreParts))
