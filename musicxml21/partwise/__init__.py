# -----------------------------------------------------------------------------
# Name:         partwise/__init__.py
# Purpose:      MusicXML score-partwise reading and writing
#
# Authors:      The musicxml21 developers
#
# Copyright:    (c) 2026 The musicxml21 developers
# License:      MIT, see LICENSE
# -----------------------------------------------------------------------------
'''
The :mod:`partwise` module maps between MusicXML score-partwise documents and
a tree of immutable records (:class:`Score`, :class:`Part`, :class:`Measure`,
:class:`Note`, ...).  Every record has a ``toElement()`` method that builds a
fresh ElementTree element, and a ``fromElement()`` classmethod that extracts
the record from one.
'''

# the order of these imports matters: each module imports what it needs from
# this package.
from .mxlexceptions import MusicXMLError
from .mxlexceptions import InvalidDocument
from .mxlexceptions import UnsupportedDocumentKind
from .mxlexceptions import MissingRequiredField
from .mxlexceptions import MalformedValue
from .mxlexceptions import AmbiguousOrMissingVariant

from .pitchnames import nameFromPitch
from .pitchnames import pitchFromName

from .mxlshared import MxlShared

from .mxlattributes import Key
from .mxlattributes import Clef
from .mxlattributes import Time
from .mxlattributes import Transpose
from .mxlattributes import Attributes

from .mxlnote import Pitch
from .mxlnote import Rest
from .mxlnote import Unpitched
from .mxlnote import Note

from .mxlinstrument import InstrumentIdPolicy
from .mxlinstrument import DEFAULT_ID_POLICY
from .mxlinstrument import ScoreInstrument
from .mxlinstrument import MidiDevice
from .mxlinstrument import MidiInstrument

from .mxlpartlist import ScorePart
from .mxlpartlist import PartList
from .mxlmeasure import Measure
from .mxlpart import Part
from .mxlscore import Score
from .mxlscore import SCORE_PARTWISE

from .mxlreader import MxlReader
from .mxlreader import parseDocument
from .mxlreader import readDocument
from .mxlwriter import MxlWriter
from .mxlwriter import writeDocument

from .m21objectconvert import M21ObjectConvert
