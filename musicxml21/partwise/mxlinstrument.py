# ------------------------------------------------------------------------------
# Name:          mxlinstrument.py
# Purpose:       Per-part instrument metadata: <score-instrument>,
#                <midi-device> and <midi-instrument>, plus the naming policy
#                that derives their @id from the owning part's id.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from xml.etree.ElementTree import Element

from musicxml21.partwise import MalformedValue
from musicxml21.partwise import MxlShared

_ID_WITHOUT_SUFFIX = 'Instrument id "{}" ends neither with "{}" nor with "-I<number>".'
_NUMBERED_INSTRUMENT_ID = re.compile(r'^(.+)-I\d+$')


class InstrumentIdPolicy:
    '''
    Maps a part id (e.g. 'P1') to the id of an instrument element in that part
    (e.g. 'P1-I1') and back.  Writing always uses suffix.  Reading accepts
    suffix, and also any '{partId}-I<n>' id, since a part can hold several
    instruments (a drum kit part often uses 'P2-I36', 'P2-I38', ...).
    Pass suffix='' for files whose instrument ids are the part ids.
    '''
    def __init__(self, suffix: str = '-I1') -> None:
        self.suffix: str = suffix

    def formatId(self, partId: str) -> str:
        return partId + self.suffix

    def parseId(self, elementId: str) -> str:
        if not self.suffix:
            return elementId
        if len(elementId) > len(self.suffix) and elementId.endswith(self.suffix):
            return elementId[:-len(self.suffix)]
        match = _NUMBERED_INSTRUMENT_ID.match(elementId)
        if match is None:
            raise MalformedValue(_ID_WITHOUT_SUFFIX.format(elementId, self.suffix))
        return match.group(1)


DEFAULT_ID_POLICY = InstrumentIdPolicy()


@dataclass(frozen=True)
class ScoreInstrument:
    '''
    A single instrument within a score-part.  Required if the score specifies
    MIDI channels, banks or programs for more than one instrument per part.
    '''
    partId: str
    name: str
    abbreviation: str | None = None

    def toElement(self, policy: InstrumentIdPolicy = DEFAULT_ID_POLICY) -> Element:
        elem = Element('score-instrument', {'id': policy.formatId(self.partId)})
        MxlShared.appendTextElement(elem, 'instrument-name', self.name)
        if self.abbreviation is not None:
            MxlShared.appendTextElement(elem, 'instrument-abbreviation', self.abbreviation)
        return elem

    @classmethod
    def fromElement(
        cls,
        elem: Element,
        policy: InstrumentIdPolicy = DEFAULT_ID_POLICY
    ) -> 'ScoreInstrument':
        return cls(
            partId=policy.parseId(MxlShared.requiredAttrib(elem, 'id')),
            name=MxlShared.requiredText(elem, 'instrument-name', strip=False),
            abbreviation=MxlShared.optionalText(elem, 'instrument-abbreviation', strip=False),
        )


@dataclass(frozen=True)
class MidiDevice:
    '''
    Corresponds to the DeviceName meta event in Standard MIDI Files.  The
    device name is the element's text; port is 1..16.
    '''
    partId: str | None = None
    port: int | None = None
    deviceName: str | None = None

    def __post_init__(self) -> None:
        if self.port is not None:
            MxlShared.checkRange(self.port, 1, 16, 'midi-device port')

    def toElement(self, policy: InstrumentIdPolicy = DEFAULT_ID_POLICY) -> Element:
        elem = Element('midi-device')
        if self.partId is not None:
            elem.set('id', policy.formatId(self.partId))
        if self.port is not None:
            elem.set('port', str(self.port))
        if self.deviceName is not None:
            elem.text = self.deviceName
        return elem

    @classmethod
    def fromElement(
        cls,
        elem: Element,
        policy: InstrumentIdPolicy = DEFAULT_ID_POLICY
    ) -> 'MidiDevice':
        idStr: str | None = elem.get('id')
        deviceName: str = elem.text or ''
        return cls(
            partId=policy.parseId(idStr) if idStr is not None else None,
            port=MxlShared.optionalIntAttrib(elem, 'port'),
            deviceName=deviceName or None,
        )


@dataclass(frozen=True)
class MidiInstrument:
    '''
    The initial MIDI sound of an instrument: channel 0..15 and program 0..127
    (numbered from 0, as in MIDI messages and music21), volume 0..100 (percent
    of full MIDI volume), pan -180..180 (degrees, 0 is straight ahead).

    In the document, <midi-channel> and <midi-program> are numbered from 1.

    >>> MidiInstrument(0, 0, 100, 0)
    MidiInstrument(channel=0, program=0, volume=100, pan=0, partId='P1')
    >>> MidiInstrument(9, 0).toElement().findtext('midi-channel')
    '10'
    '''
    channel: int = 0
    program: int = 0
    volume: int = 100
    pan: int = 0
    partId: str = 'P1'

    def __post_init__(self) -> None:
        MxlShared.checkRange(self.channel, 0, 15, 'MIDI channel')
        MxlShared.checkRange(self.program, 0, 127, 'MIDI program')
        MxlShared.checkRange(self.volume, 0, 100, 'volume')
        MxlShared.checkRange(self.pan, -180, 180, 'pan')

    def toElement(self, policy: InstrumentIdPolicy = DEFAULT_ID_POLICY) -> Element:
        elem = Element('midi-instrument', {'id': policy.formatId(self.partId)})
        MxlShared.appendTextElement(elem, 'midi-channel', self.channel + 1)
        MxlShared.appendTextElement(elem, 'midi-program', self.program + 1)
        MxlShared.appendTextElement(elem, 'volume', self.volume)
        MxlShared.appendTextElement(elem, 'pan', self.pan)
        return elem

    @classmethod
    def fromElement(
        cls,
        elem: Element,
        policy: InstrumentIdPolicy = DEFAULT_ID_POLICY
    ) -> 'MidiInstrument':
        channel: int = MxlShared.checkRange(
            MxlShared.requiredInt(elem, 'midi-channel'), 1, 16, 'midi-channel')
        program: int = MxlShared.checkRange(
            MxlShared.requiredInt(elem, 'midi-program'), 1, 128, 'midi-program')
        # volume and pan are decimals in MusicXML; we keep whole numbers
        volume: float = MxlShared.parseNumber(MxlShared.requiredText(elem, 'volume'), 'volume')
        pan: float = MxlShared.parseNumber(MxlShared.requiredText(elem, 'pan'), 'pan')
        return cls(
            channel=channel - 1,
            program=program - 1,
            volume=round(volume),
            pan=round(pan),
            partId=policy.parseId(MxlShared.requiredAttrib(elem, 'id')),
        )
