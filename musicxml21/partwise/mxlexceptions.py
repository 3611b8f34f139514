# ------------------------------------------------------------------------------
# Name:          mxlexceptions.py
# Purpose:       Exceptions that can be raised while reading or building
#                MusicXML score-partwise documents.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
class MusicXMLError(Exception):
    '''Base class for all musicxml21 errors.'''
    pass

class InvalidDocument(MusicXMLError):
    '''When the document text is not well-formed XML.'''
    pass

class UnsupportedDocumentKind(MusicXMLError):
    '''When the root element is not <score-partwise>.'''
    pass

class MissingRequiredField(MusicXMLError):
    '''When an expected child element or attribute is absent.'''
    pass

class MalformedValue(MusicXMLError):
    '''When text content (or a constructor argument) is not a valid value.'''
    pass

class AmbiguousOrMissingVariant(MusicXMLError):
    '''When not exactly one of several alternative representations was given.'''
    pass
