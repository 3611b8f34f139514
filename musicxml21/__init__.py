# ------------------------------------------------------------------------------
# Purpose:       musicxml21 reads and writes MusicXML score-partwise documents
#                as immutable record trees, and converts them to music21.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

__all__ = [
    'partwise',
    'parseDocument',
    'readDocument',
    'writeDocument',
    'MusicXMLError',
]

from .partwise import parseDocument
from .partwise import readDocument
from .partwise import writeDocument
from .partwise import MusicXMLError

__version__ = '1.0.0'
