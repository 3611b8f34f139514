# ------------------------------------------------------------------------------
# Name:          mxlmeasure.py
# Purpose:       <measure>: an optional <attributes> followed by a sequence
#                of <note>s.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from dataclasses import dataclass
from xml.etree.ElementTree import Element

from musicxml21.partwise import MxlShared
from musicxml21.partwise import Attributes
from musicxml21.partwise import Note


@dataclass(frozen=True)
class Measure:
    '''
    attributes is None when the measure has no <attributes> element; in
    that case the previous measure's attributes still apply (nothing here
    looks back, see Part.attributesInEffect()).
    '''
    attributes: Attributes | None = None
    notes: tuple[Note, ...] = ()
    number: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'notes', tuple(self.notes))

    def toElement(self) -> Element:
        elem = Element('measure')
        if self.number is not None:
            elem.set('number', self.number)
        if self.attributes is not None:
            elem.append(self.attributes.toElement())
        for note in self.notes:
            elem.append(note.toElement())
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Measure':
        # other measure content (<backup>, <direction>, <barline>, ...) is skipped
        attributesEl: Element | None = MxlShared.findChild(elem, 'attributes')
        notes: list[Note] = [Note.fromElement(noteEl) for noteEl in elem.iterfind('note')]
        return cls(
            attributes=Attributes.fromElement(attributesEl) if attributesEl is not None else None,
            notes=tuple(notes),
            number=elem.get('number'),
        )
