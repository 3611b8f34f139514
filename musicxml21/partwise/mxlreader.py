# ------------------------------------------------------------------------------
# Name:          mxlreader.py
# Purpose:       MusicXML score-partwise parser: text (or file) -> Score
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
'''
To convert a string containing a MusicXML score-partwise document into a
:class:`Score`, use :func:`parseDocument` (or :func:`readDocument` for a file):

>>> from musicxml21.partwise import parseDocument
>>> score = parseDocument("""<?xml version="1.0" encoding="UTF-8"?>
... <score-partwise version="4.0">
...   <part-list>
...     <score-part id="P1">
...       <part-name>Piano</part-name>
...       <midi-instrument id="P1-I1">
...         <midi-channel>1</midi-channel>
...         <midi-program>1</midi-program>
...         <volume>100</volume>
...         <pan>0</pan>
...       </midi-instrument>
...     </score-part>
...   </part-list>
...   <part id="P1">
...     <measure number="1">
...       <note><rest/><duration>4</duration></note>
...     </measure>
...   </part>
... </score-partwise>
... """)
>>> score.parts[0].measures[0].notes[0].isRest
True

Extraction is a single top-down pass: <part-list> and each <score-part>,
then each <part>, <measure> and <note>.  Any error is raised where it is
found and propagates unchanged; there are no partial results.

Only the subset of MusicXML described by the record types is read; other
elements (<direction>, <barline>, <lyric>, ...) are skipped.
'''
import pathlib
from xml.etree.ElementTree import Element, ParseError, fromstring

import music21 as m21

from musicxml21.partwise import InvalidDocument
from musicxml21.partwise import UnsupportedDocumentKind
from musicxml21.partwise import InstrumentIdPolicy
from musicxml21.partwise import DEFAULT_ID_POLICY
from musicxml21.partwise import Score
from musicxml21.partwise import SCORE_PARTWISE

environLocal = m21.environment.Environment('musicxml21.partwise.mxlreader')

# Text Strings for Error Conditions
# -----------------------------------------------------------------------------
_INVALID_XML_DOC = 'MusicXML document is not valid XML.'
_WRONG_ROOT_ELEMENT = 'Root element should be <score-partwise>, not <{}>.'
_UNMATCHED_PART_IDS = 'Part ids without both a <score-part> and a <part>: {}'


class MxlReader:
    '''
    An :class:`MxlReader` instance manages the conversion of one MusicXML
    score-partwise document into a :class:`Score`.

    :param str theDocument: A string containing a MusicXML document.
    :raises: :exc:`InvalidDocument` when the document is not valid XML.
    :raises: :exc:`UnsupportedDocumentKind` when the root element is not
        <score-partwise> (for example <score-timewise>).
    '''
    Debug: bool = False  # can be set to True for more debugging

    def __init__(self, theDocument: str | None = None) -> None:
        environLocal.printDebug('*** initializing MxlReader')

        # client can set this before calling run(), for files whose
        # instrument ids aren't '{partId}-I1'
        self.idPolicy: InstrumentIdPolicy = DEFAULT_ID_POLICY

        self.documentRoot: Element
        if theDocument is None:
            self.documentRoot = Element(SCORE_PARTWISE)
            return

        try:
            self.documentRoot = fromstring(theDocument)
        except ParseError as parseErr:
            environLocal.warn(
                '\n\nERROR: Parsing the MusicXML document with ElementTree failed.')
            environLocal.warn(f'We got the following error:\n{parseErr}')
            raise InvalidDocument(_INVALID_XML_DOC)

        if self.documentRoot.tag != SCORE_PARTWISE:
            raise UnsupportedDocumentKind(_WRONG_ROOT_ELEMENT.format(self.documentRoot.tag))

    def run(self) -> Score:
        environLocal.printDebug('*** processing <score-partwise>')
        score: Score = Score.fromElement(self.documentRoot, self.idPolicy)

        unmatched: list[str] = score.unmatchedPartIds()
        if unmatched:
            environLocal.warn(_UNMATCHED_PART_IDS.format(', '.join(unmatched)))

        if self.Debug:
            numMeasures: int = sum(len(part.measures) for part in score.parts)
            print(f'MxlReader: {len(score.parts)} parts, {numMeasures} measures')

        return score


def parseDocument(
    text: str,
    idPolicy: InstrumentIdPolicy = DEFAULT_ID_POLICY
) -> Score:
    '''
    Parses a string containing a MusicXML score-partwise document.
    '''
    reader = MxlReader(text)
    reader.idPolicy = idPolicy
    return reader.run()


def readDocument(
    filePath: str | pathlib.Path,
    idPolicy: InstrumentIdPolicy = DEFAULT_ID_POLICY
) -> Score:
    '''
    Reads and parses a (non-compressed) MusicXML score-partwise file.
    '''
    # Try the three most likely encodings.  Most files are UTF-8, but UTF-16
    # and latin-1 files do exist.
    dataString: str
    try:
        with open(filePath, 'rt', encoding='utf-8') as f:
            dataString = f.read()
    except UnicodeDecodeError:
        try:
            with open(filePath, 'rt', encoding='utf-16') as f:
                dataString = f.read()
        except UnicodeError:
            with open(filePath, 'rt', encoding='latin-1') as f:
                dataString = f.read()

    return parseDocument(dataString, idPolicy)
