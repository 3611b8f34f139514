# ------------------------------------------------------------------------------
# Name:          m21objectconvert.py
# Purpose:       M21ObjectConvert is a static class full of utility routines
#                that convert a parsed Score (and its leaf records) into
#                music21 objects.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import re
from fractions import Fraction

import music21 as m21
from music21.common.numberTools import opFrac

from musicxml21.partwise import Attributes
from musicxml21.partwise import Clef
from musicxml21.partwise import Key
from musicxml21.partwise import Measure
from musicxml21.partwise import Note
from musicxml21.partwise import Part
from musicxml21.partwise import Pitch
from musicxml21.partwise import Score
from musicxml21.partwise import ScorePart
from musicxml21.partwise import Time

environLocal = m21.environment.Environment('musicxml21.partwise.m21objectconvert')

_NO_DIVISIONS = 'Part "{}" has notes before any <divisions>; assuming divisions=1.'
_ODD_ALTER = 'Pitch alteration {} has no music21 accidental; using a microtone.'

# line used when a <clef> has no <line>
_DEFAULT_CLEF_LINES: dict[str, int] = {'G': 2, 'F': 4, 'C': 3}


class M21ObjectConvert:
    @staticmethod
    def scoreToM21(score: Score) -> m21.stream.Score:
        m21Score = m21.stream.Score()
        for part in score.parts:
            scorePart: ScorePart | None = score.partList.scorePartFor(part.partId)
            m21Score.insert(0, M21ObjectConvert.partToM21(part, scorePart))
        return m21Score

    @staticmethod
    def partToM21(part: Part, scorePart: ScorePart | None = None) -> m21.stream.Part:
        m21Part = m21.stream.Part()
        m21Part.id = part.partId

        inEffect: list[Attributes | None] = part.attributesInEffect()

        if scorePart is not None:
            m21Part.partName = scorePart.name
            m21Part.insert(0, M21ObjectConvert.instrumentToM21(scorePart, inEffect))

        warnedNoDivisions: bool = False
        for measure, attributes in zip(part.measures, inEffect):
            divisions: int = 1
            if attributes is not None:
                divisions = attributes.divisions
            elif measure.notes and not warnedNoDivisions:
                environLocal.warn(_NO_DIVISIONS.format(part.partId))
                warnedNoDivisions = True
            m21Part.append(M21ObjectConvert.measureToM21(measure, divisions))

        return m21Part

    @staticmethod
    def instrumentToM21(
        scorePart: ScorePart,
        inEffect: list[Attributes | None]
    ) -> m21.instrument.Instrument:
        inst = m21.instrument.Instrument()
        inst.partId = scorePart.partId
        inst.partName = scorePart.name
        if scorePart.scoreInstrument is not None:
            inst.instrumentName = scorePart.scoreInstrument.name
            if scorePart.scoreInstrument.abbreviation is not None:
                inst.instrumentAbbreviation = scorePart.scoreInstrument.abbreviation
        if scorePart.midiInstrument is not None:
            inst.midiChannel = scorePart.midiInstrument.channel
            inst.midiProgram = scorePart.midiInstrument.program

        # the transposition in effect at the start of the part
        if inEffect and inEffect[0] is not None and inEffect[0].transpose is not None:
            transpose = inEffect[0].transpose
            semitones: int = transpose.chromatic + 12 * (transpose.octaveChange or 0)
            inst.transposition = m21.interval.Interval(semitones)

        return inst

    @staticmethod
    def measureToM21(measure: Measure, divisions: int) -> m21.stream.Measure:
        m21Measure = m21.stream.Measure()
        if measure.number is not None:
            match = re.match(r'^(\d+)(.*)$', measure.number)
            if match:
                m21Measure.number = int(match.group(1))
                if match.group(2):
                    m21Measure.numberSuffix = match.group(2)

        if measure.attributes is not None:
            attributes: Attributes = measure.attributes
            if attributes.clef is not None:
                m21Measure.insert(0, M21ObjectConvert.clefToM21(attributes.clef))
            m21Measure.insert(0, M21ObjectConvert.keyToM21(attributes.key))
            m21Measure.insert(0, M21ObjectConvert.timeToM21(attributes.time))

        # a pitched note marked <chord/> joins the previous pitched note
        groups: list[list[Note]] = []
        for note in measure.notes:
            if (note.chord and note.pitch is not None
                    and groups and groups[-1][0].pitch is not None):
                groups[-1].append(note)
            else:
                groups.append([note])

        for group in groups:
            if len(group) == 1:
                m21Measure.append(M21ObjectConvert.noteToM21(group[0], divisions))
            else:
                m21Measure.append(M21ObjectConvert.chordToM21(group, divisions))

        return m21Measure

    @staticmethod
    def clefToM21(clef: Clef) -> m21.clef.Clef:
        if clef.sign == 'percussion':
            return m21.clef.PercussionClef()
        if clef.sign == 'TAB':
            return m21.clef.TabClef()
        if clef.sign in ('none', 'jianpu'):
            # music21 has nothing closer for jianpu
            return m21.clef.NoClef()

        line: int = clef.line if clef.line is not None else _DEFAULT_CLEF_LINES[clef.sign]
        return m21.clef.clefFromString(
            f'{clef.sign}{line}',
            octaveShift=clef.octaveChange or 0
        )

    @staticmethod
    def keyToM21(key: Key) -> m21.key.KeySignature:
        keySig = m21.key.KeySignature(key.fifths)
        if key.mode in ('major', 'minor'):
            return keySig.asKey(key.mode)
        return keySig

    @staticmethod
    def timeToM21(time: Time) -> m21.meter.TimeSignature:
        return m21.meter.TimeSignature(f'{time.beats}/{time.beatType}')

    @staticmethod
    def pitchToM21(pitch: Pitch) -> m21.pitch.Pitch:
        m21Pitch = m21.pitch.Pitch()
        m21Pitch.step = pitch.step
        m21Pitch.octave = pitch.octave
        if pitch.alteration:
            try:
                m21Pitch.accidental = m21.pitch.Accidental(pitch.alteration)
            except m21.pitch.AccidentalException:
                environLocal.warn(_ODD_ALTER.format(pitch.alteration))
                m21Pitch.microtone = m21.pitch.Microtone(pitch.alteration * 100)
        return m21Pitch

    @staticmethod
    def noteToM21(note: Note, divisions: int) -> m21.note.GeneralNote:
        quarterLength = opFrac(Fraction(note.duration, divisions))

        if note.pitch is not None:
            m21Pitch: m21.pitch.Pitch = M21ObjectConvert.pitchToM21(note.pitch)
            if note.accidental is not None and m21Pitch.accidental is not None:
                m21Pitch.accidental.displayStatus = True
            return m21.note.Note(m21Pitch, quarterLength=quarterLength)

        if note.rest is not None:
            m21Rest = m21.note.Rest(quarterLength=quarterLength)
            if note.rest.measureRest:
                m21Rest.fullMeasure = True
            return m21Rest

        m21Unpitched = m21.note.Unpitched(quarterLength=quarterLength)
        if note.unpitched is not None and note.unpitched.displayStep is not None:
            m21Unpitched.displayStep = note.unpitched.displayStep
            if note.unpitched.displayOctave is not None:
                m21Unpitched.displayOctave = note.unpitched.displayOctave
        return m21Unpitched

    @staticmethod
    def chordToM21(notes: list[Note], divisions: int) -> m21.chord.Chord:
        # the chord takes the first note's duration
        m21Notes: list[m21.note.GeneralNote] = [
            M21ObjectConvert.noteToM21(note, divisions) for note in notes
        ]
        return m21.chord.Chord(
            m21Notes,
            quarterLength=opFrac(Fraction(notes[0].duration, divisions))
        )
