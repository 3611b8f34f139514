# ------------------------------------------------------------------------------
# Name:          mxlnote.py
# Purpose:       Pitch, Rest, Unpitched and the <note> element, whose content
#                is exactly one of those three.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from dataclasses import dataclass
from xml.etree.ElementTree import Element, SubElement

from musicxml21.partwise import AmbiguousOrMissingVariant
from musicxml21.partwise import MxlShared
from musicxml21.partwise import nameFromPitch
from musicxml21.partwise import pitchFromName

STEPS: tuple[str, ...] = ('A', 'B', 'C', 'D', 'E', 'F', 'G')

# from shortest to longest
NOTE_TYPES: tuple[str, ...] = (
    '1024th', '512th', '256th', '128th', '64th', '32nd', '16th',
    'eighth', 'quarter', 'half', 'whole', 'breve', 'long', 'maxima',
)

ACCIDENTALS: tuple[str, ...] = (
    'sharp', 'natural', 'flat', 'double-sharp', 'sharp-sharp', 'flat-flat',
    'natural-sharp', 'natural-flat', 'quarter-flat', 'quarter-sharp',
    'three-quarters-flat', 'three-quarters-sharp',
    'sharp-down', 'sharp-up', 'natural-down', 'natural-up', 'flat-down', 'flat-up',
    'double-sharp-down', 'double-sharp-up', 'flat-flat-down', 'flat-flat-up',
    'arrow-down', 'arrow-up', 'triple-sharp', 'triple-flat',
    'slash-quarter-sharp', 'slash-sharp', 'slash-flat', 'double-slash-flat',
    'sharp-1', 'sharp-2', 'sharp-3', 'sharp-5', 'flat-1', 'flat-2', 'flat-3', 'flat-4',
    'sori', 'koron', 'other',
)

# Text Strings for Error Conditions
# -----------------------------------------------------------------------------
_AMBIGUOUS_PITCH = 'Pitch takes either a MIDI pitch or step/alteration/octave, not both.'
_MISSING_PITCH = 'Pitch needs either a MIDI pitch or both step and octave.'
_AMBIGUOUS_NOTE_CONTENT = 'Note content is ambiguous: more than one of pitch, rest, unpitched.'
_MISSING_NOTE_CONTENT = 'Note content is missing: one of pitch, rest, unpitched is required.'


def _alterFromText(text: str) -> int | float:
    alter: float = MxlShared.parseNumber(text, 'alter')
    if alter.is_integer():
        return int(alter)
    return alter

def _appendDisplayPosition(
    elem: Element,
    displayStep: str | None,
    displayOctave: int | None
) -> None:
    if displayStep is not None:
        MxlShared.appendTextElement(elem, 'display-step', displayStep)
    if displayOctave is not None:
        MxlShared.appendTextElement(elem, 'display-octave', displayOctave)

def _checkDisplayStep(displayStep: str | None) -> None:
    if displayStep is not None:
        MxlShared.checkChoice(displayStep, STEPS, 'display-step')


@dataclass(frozen=True, init=False)
class Pitch:
    '''
    A pitch, stored MusicXML-style as diatonic step, chromatic alteration
    (in semitones, possibly fractional) and octave.  Can be constructed from a
    MIDI pitch number instead (black keys are spelled as sharps):

    >>> Pitch(61) == Pitch(step='C', alteration=1, octave=4)
    True
    '''
    step: str
    alteration: int | float
    octave: int

    def __init__(
        self,
        midi: int | None = None,
        *,
        step: str | None = None,
        alteration: int | float | None = None,
        octave: int | None = None,
    ) -> None:
        if midi is not None:
            if step is not None or alteration is not None or octave is not None:
                raise AmbiguousOrMissingVariant(_AMBIGUOUS_PITCH)
            MxlShared.checkRange(midi, 0, 127, 'MIDI pitch')
            step, alteration, octave = nameFromPitch(midi)
        elif step is None or octave is None:
            raise AmbiguousOrMissingVariant(_MISSING_PITCH)

        MxlShared.checkChoice(step, STEPS, 'step')
        object.__setattr__(self, 'step', step)
        object.__setattr__(self, 'alteration', alteration if alteration is not None else 0)
        object.__setattr__(self, 'octave', octave)

    @property
    def midi(self) -> int:
        return pitchFromName(self.step, self.alteration, self.octave)

    def toElement(self) -> Element:
        elem = Element('pitch')
        MxlShared.appendTextElement(elem, 'step', self.step)
        if self.alteration:
            # absent <alter> means 0
            MxlShared.appendTextElement(elem, 'alter', MxlShared.numberToString(self.alteration))
        MxlShared.appendTextElement(elem, 'octave', self.octave)
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Pitch':
        alterText: str | None = MxlShared.optionalText(elem, 'alter')
        return cls(
            step=MxlShared.requiredText(elem, 'step'),
            alteration=_alterFromText(alterText) if alterText is not None else 0,
            octave=MxlShared.requiredInt(elem, 'octave'),
        )


@dataclass(frozen=True)
class Rest:
    '''
    A notated rest.  measureRest marks a complete-measure rest; displayStep
    and displayOctave optionally place it on the staff.
    '''
    measureRest: bool = False
    displayStep: str | None = None
    displayOctave: int | None = None

    def __post_init__(self) -> None:
        _checkDisplayStep(self.displayStep)

    def toElement(self) -> Element:
        elem = Element('rest')
        if self.measureRest:
            elem.set('measure', 'yes')
        _appendDisplayPosition(elem, self.displayStep, self.displayOctave)
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Rest':
        measureRest: bool = False
        measureStr: str | None = elem.get('measure')
        if measureStr is not None:
            measureRest = MxlShared.parseYesNo(measureStr.strip(), '@measure', 'rest')
        return cls(
            measureRest=measureRest,
            displayStep=MxlShared.optionalText(elem, 'display-step'),
            displayOctave=MxlShared.optionalInt(elem, 'display-octave'),
        )


@dataclass(frozen=True)
class Unpitched:
    '''
    A notated element without definite pitch, such as unpitched percussion
    or speaking voice.
    '''
    displayStep: str | None = None
    displayOctave: int | None = None

    def __post_init__(self) -> None:
        _checkDisplayStep(self.displayStep)

    def toElement(self) -> Element:
        elem = Element('unpitched')
        _appendDisplayPosition(elem, self.displayStep, self.displayOctave)
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Unpitched':
        return cls(
            displayStep=MxlShared.optionalText(elem, 'display-step'),
            displayOctave=MxlShared.optionalInt(elem, 'display-octave'),
        )


@dataclass(frozen=True, init=False)
class Note:
    '''
    A note, rest or unpitched note.  The content is decided once, at
    construction: exactly one of pitch, rest or unpitched must be given (rest
    and unpitched also accept True, meaning a plain <rest/> or <unpitched/>),
    otherwise AmbiguousOrMissingVariant is raised.

    duration is in divisions (see Attributes.divisions).  noteType is the
    graphic note type (<type>: 'quarter', 'eighth', ...), dots the number of
    augmentation dots, accidental the notated accidental ('sharp', 'flat',
    ...).  chord marks a note that sounds together with the previous note
    (<chord/>).
    '''
    content: Pitch | Rest | Unpitched
    duration: int
    noteType: str | None
    accidental: str | None
    voice: str | None
    dots: int
    chord: bool

    def __init__(
        self,
        *,
        pitch: Pitch | None = None,
        rest: Rest | bool | None = None,
        unpitched: Unpitched | bool | None = None,
        duration: int,
        noteType: str | None = None,
        accidental: str | None = None,
        voice: str | None = None,
        dots: int = 0,
        chord: bool = False,
    ) -> None:
        if rest is True:
            rest = Rest()
        elif rest is False:
            rest = None
        if unpitched is True:
            unpitched = Unpitched()
        elif unpitched is False:
            unpitched = None

        supplied: list[Pitch | Rest | Unpitched] = [
            c for c in (pitch, rest, unpitched) if c is not None
        ]
        if len(supplied) > 1:
            raise AmbiguousOrMissingVariant(_AMBIGUOUS_NOTE_CONTENT)
        if not supplied:
            raise AmbiguousOrMissingVariant(_MISSING_NOTE_CONTENT)

        MxlShared.checkNonNegative(duration, 'duration')
        if noteType is not None:
            MxlShared.checkChoice(noteType, NOTE_TYPES, 'note type')
        if accidental is not None:
            MxlShared.checkChoice(accidental, ACCIDENTALS, 'accidental')
        MxlShared.checkNonNegative(dots, 'dots')

        object.__setattr__(self, 'content', supplied[0])
        object.__setattr__(self, 'duration', duration)
        object.__setattr__(self, 'noteType', noteType)
        object.__setattr__(self, 'accidental', accidental)
        object.__setattr__(self, 'voice', voice)
        object.__setattr__(self, 'dots', dots)
        object.__setattr__(self, 'chord', chord)

    @property
    def pitch(self) -> Pitch | None:
        if isinstance(self.content, Pitch):
            return self.content
        return None

    @property
    def rest(self) -> Rest | None:
        if isinstance(self.content, Rest):
            return self.content
        return None

    @property
    def unpitched(self) -> Unpitched | None:
        if isinstance(self.content, Unpitched):
            return self.content
        return None

    @property
    def isRest(self) -> bool:
        return isinstance(self.content, Rest)

    def toElement(self) -> Element:
        elem = Element('note')
        if self.chord:
            SubElement(elem, 'chord')
        elem.append(self.content.toElement())
        MxlShared.appendTextElement(elem, 'duration', self.duration)
        if self.voice is not None:
            MxlShared.appendTextElement(elem, 'voice', self.voice)
        if self.noteType is not None:
            MxlShared.appendTextElement(elem, 'type', self.noteType)
        for _ in range(self.dots):
            SubElement(elem, 'dot')
        if self.accidental is not None:
            MxlShared.appendTextElement(elem, 'accidental', self.accidental)
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Note':
        pitchEl: Element | None = MxlShared.findChild(elem, 'pitch')
        restEl: Element | None = MxlShared.findChild(elem, 'rest')
        unpitchedEl: Element | None = MxlShared.findChild(elem, 'unpitched')
        return cls(
            pitch=Pitch.fromElement(pitchEl) if pitchEl is not None else None,
            rest=Rest.fromElement(restEl) if restEl is not None else None,
            unpitched=Unpitched.fromElement(unpitchedEl) if unpitchedEl is not None else None,
            duration=MxlShared.requiredInt(elem, 'duration'),
            noteType=MxlShared.optionalText(elem, 'type'),
            accidental=MxlShared.optionalText(elem, 'accidental'),
            voice=MxlShared.optionalText(elem, 'voice', strip=False),
            dots=len(elem.findall('dot')),
            chord=MxlShared.findChild(elem, 'chord') is not None,
        )
