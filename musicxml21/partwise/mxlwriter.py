# ------------------------------------------------------------------------------
# Name:          mxlwriter.py
# Purpose:       MxlWriter is an object that takes a Score and writes it to a
#                file (or string) as a MusicXML score-partwise document.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import io
import pathlib
from xml.etree.ElementTree import Element, ElementTree, indent

from musicxml21.partwise import InstrumentIdPolicy
from musicxml21.partwise import DEFAULT_ID_POLICY
from musicxml21.partwise import Score

# pylint: disable=line-too-long
_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
_PARTWISE_DOCTYPE = (
    '<!DOCTYPE score-partwise PUBLIC "-//Recordare//DTD MusicXML 4.0 Partwise//EN" "http://www.musicxml.org/dtds/partwise.dtd">\n'
)
# pylint: enable=line-too-long


class MxlWriter:
    def __init__(self, score: Score) -> None:
        self._score: Score = score

        # default options (these can be set to non-default values by clients,
        # as long as they do it before they call write())
        self.indentSpace: str = '  '
        self.includeDoctype: bool = True
        self.idPolicy: InstrumentIdPolicy = DEFAULT_ID_POLICY

    def makeRootElement(self) -> Element:
        # a fresh tree every time; nothing is cached on the Score
        root: Element = self._score.toElement(self.idPolicy)
        if self.indentSpace:
            indent(root, space=self.indentSpace, level=0)
        return root

    def write(self, fp) -> bool:
        root: Element = self.makeRootElement()
        fp.write(_XML_DECLARATION)
        if self.includeDoctype:
            fp.write(_PARTWISE_DOCTYPE)
        ElementTree(root).write(fp, encoding='unicode')
        fp.write('\n')
        return True

    def toString(self) -> str:
        with io.StringIO() as f:
            self.write(f)
            return f.getvalue()


def writeDocument(
    score: Score,
    filePath: str | pathlib.Path,
    includeDoctype: bool = True
) -> None:
    writer = MxlWriter(score)
    writer.includeDoctype = includeDoctype
    with open(filePath, 'wt', encoding='utf-8') as f:
        writer.write(f)
