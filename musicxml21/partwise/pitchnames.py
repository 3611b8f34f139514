# ------------------------------------------------------------------------------
# Name:          pitchnames.py
# Purpose:       Conversion between MIDI pitch numbers and MusicXML
#                step/alter/octave triples.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
PITCH_TO_NAME: dict[int, str] = {
    0: 'C', 1: 'C#', 2: 'D', 3: 'D#', 4: 'E', 5: 'F',
    6: 'F#', 7: 'G', 8: 'G#', 9: 'A', 10: 'A#', 11: 'B',
}
SHARPS: tuple[int, ...] = (1, 3, 6, 8, 10)

# semitones above C for each diatonic step
STEP_TO_SEMITONES: dict[str, int] = {
    'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11,
}

def nameFromPitch(midiPitch: int) -> tuple[str, int, int]:
    '''
    Returns (step, alter, octave) for a MIDI pitch number.  Black keys are
    always spelled as sharps.  Middle C (60) is ('C', 0, 4).
    '''
    i: int = int(midiPitch)
    rem: int = i % 12
    noteName: str = PITCH_TO_NAME[rem]

    step: str
    alter: int
    if rem in SHARPS:
        step = noteName[0]
        alter = 1
    else:
        step = noteName
        alter = 0

    octave: int = (i // 12) - 1
    return step, alter, octave

def pitchFromName(step: str, alter: float, octave: int) -> int:
    '''
    Inverse of nameFromPitch, for any spelling.  Microtonal alters are rounded
    to the nearest semitone.
    '''
    return (octave + 1) * 12 + STEP_TO_SEMITONES[step] + round(alter)
