# ------------------------------------------------------------------------------
# Name:          mxlattributes.py
# Purpose:       Key, Clef, Time, Transpose and the <attributes> element that
#                aggregates them.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from dataclasses import dataclass
from xml.etree.ElementTree import Element, SubElement

import music21 as m21

from musicxml21.partwise import MxlShared

environLocal = m21.environment.Environment('musicxml21.partwise.mxlattributes')

# If maximum compatibility with Standard MIDI 1.0 files is important,
# divisions should not exceed this.
MAX_MIDI_DIVISIONS: int = 16383

KEY_MODES: tuple[str, ...] = (
    'major', 'minor', 'dorian', 'phrygian', 'lydian',
    'mixolydian', 'aeolian', 'ionian', 'locrian', 'none',
)

CLEF_SIGNS: tuple[str, ...] = ('G', 'F', 'C', 'percussion', 'TAB', 'jianpu', 'none')

_DIVISIONS_TOO_LARGE = 'divisions={} exceeds {}; Standard MIDI files may not represent it.'


@dataclass(frozen=True)
class Key:
    '''
    A traditional key signature.  fifths is the number of sharps (positive)
    or flats (negative); mode is one of KEY_MODES, or None.
    '''
    fifths: int
    mode: str | None = None

    def __post_init__(self) -> None:
        if self.mode is not None:
            MxlShared.checkChoice(self.mode, KEY_MODES, 'key mode')

    def toElement(self) -> Element:
        elem = Element('key')
        MxlShared.appendTextElement(elem, 'fifths', self.fifths)
        if self.mode is not None:
            MxlShared.appendTextElement(elem, 'mode', self.mode)
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Key':
        return cls(
            fifths=MxlShared.requiredInt(elem, 'fifths'),
            mode=MxlShared.optionalText(elem, 'mode'),
        )


@dataclass(frozen=True)
class Clef:
    '''
    sign is one of CLEF_SIGNS.  Line numbers are counted from the bottom of the
    staff: 2 for treble, 4 for bass, 3 for alto.
    '''
    sign: str
    line: int | None = None
    octaveChange: int | None = None

    def __post_init__(self) -> None:
        MxlShared.checkChoice(self.sign, CLEF_SIGNS, 'clef sign')
        if self.line is not None:
            MxlShared.checkRange(self.line, 1, 5, 'clef line')

    def toElement(self) -> Element:
        elem = Element('clef')
        MxlShared.appendTextElement(elem, 'sign', self.sign)
        if self.line is not None:
            MxlShared.appendTextElement(elem, 'line', self.line)
        if self.octaveChange is not None:
            MxlShared.appendTextElement(elem, 'clef-octave-change', self.octaveChange)
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Clef':
        return cls(
            sign=MxlShared.requiredText(elem, 'sign'),
            line=MxlShared.optionalInt(elem, 'line'),
            octaveChange=MxlShared.optionalInt(elem, 'clef-octave-change'),
        )


@dataclass(frozen=True)
class Time:
    beats: int = 4
    beatType: int = 4

    def __post_init__(self) -> None:
        MxlShared.checkPositive(self.beats, 'beats')
        MxlShared.checkPositive(self.beatType, 'beat-type')

    @property
    def signature(self) -> tuple[int, int]:
        return (self.beats, self.beatType)

    def toElement(self) -> Element:
        elem = Element('time')
        MxlShared.appendTextElement(elem, 'beats', self.beats)
        MxlShared.appendTextElement(elem, 'beat-type', self.beatType)
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Time':
        return cls(
            beats=MxlShared.requiredInt(elem, 'beats'),
            beatType=MxlShared.requiredInt(elem, 'beat-type'),
        )


@dataclass(frozen=True)
class Transpose:
    '''
    Written-to-sounding transposition.  diatonic counts pitch steps, chromatic
    counts semitones (not including octaveChange).  double means the music is
    doubled one octave down from what is written.
    '''
    diatonic: int = 0
    chromatic: int = 0
    octaveChange: int | None = None
    double: bool = False

    def toElement(self) -> Element:
        elem = Element('transpose')
        MxlShared.appendTextElement(elem, 'diatonic', self.diatonic)
        MxlShared.appendTextElement(elem, 'chromatic', self.chromatic)
        if self.octaveChange is not None:
            MxlShared.appendTextElement(elem, 'octave-change', self.octaveChange)
        if self.double:
            SubElement(elem, 'double')
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Transpose':
        diatonic: int | None = MxlShared.optionalInt(elem, 'diatonic')
        double: bool = False
        doubleEl: Element | None = MxlShared.findChild(elem, 'double')
        if doubleEl is not None:
            # <double/> is an empty element; an explicit @above doesn't change that
            double = True
        return cls(
            diatonic=diatonic if diatonic is not None else 0,
            chromatic=MxlShared.requiredInt(elem, 'chromatic'),
            octaveChange=MxlShared.optionalInt(elem, 'octave-change'),
            double=double,
        )


@dataclass(frozen=True)
class Attributes:
    '''
    The musical information that typically changes on measure boundaries.

    divisions: how many divisions per quarter note are used to express note
    durations (e.g. divisions=2 and duration=1 is an eighth note).

    staves/instruments: only used when there is more than one staff (or
    instrument) in the part; absent means 1.

    A measure without <attributes> conceptually inherits the previous
    measure's attributes; see Part.attributesInEffect().
    '''
    divisions: int
    key: Key
    time: Time
    staves: int | None = None
    instruments: int | None = None
    clef: Clef | None = None
    transpose: Transpose | None = None

    def __post_init__(self) -> None:
        MxlShared.checkPositive(self.divisions, 'divisions')
        if self.divisions > MAX_MIDI_DIVISIONS:
            environLocal.warn(_DIVISIONS_TOO_LARGE.format(self.divisions, MAX_MIDI_DIVISIONS))
        if self.staves is not None:
            MxlShared.checkPositive(self.staves, 'staves')
        if self.instruments is not None:
            MxlShared.checkPositive(self.instruments, 'instruments')

    def toElement(self) -> Element:
        # schema order matters to downstream consumers
        elem = Element('attributes')
        MxlShared.appendTextElement(elem, 'divisions', self.divisions)
        elem.append(self.key.toElement())
        elem.append(self.time.toElement())
        if self.staves is not None:
            MxlShared.appendTextElement(elem, 'staves', self.staves)
        if self.instruments is not None:
            MxlShared.appendTextElement(elem, 'instruments', self.instruments)
        if self.clef is not None:
            elem.append(self.clef.toElement())
        if self.transpose is not None:
            elem.append(self.transpose.toElement())
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Attributes':
        clefEl: Element | None = MxlShared.findChild(elem, 'clef')
        transposeEl: Element | None = MxlShared.findChild(elem, 'transpose')
        return cls(
            divisions=MxlShared.requiredInt(elem, 'divisions'),
            key=Key.fromElement(MxlShared.requiredChild(elem, 'key')),
            time=Time.fromElement(MxlShared.requiredChild(elem, 'time')),
            staves=MxlShared.optionalInt(elem, 'staves'),
            instruments=MxlShared.optionalInt(elem, 'instruments'),
            clef=Clef.fromElement(clefEl) if clefEl is not None else None,
            transpose=Transpose.fromElement(transposeEl) if transposeEl is not None else None,
        )
