# ------------------------------------------------------------------------------
# Name:          mxlpart.py
# Purpose:       <part>: one instrumental/vocal line, as a sequence of
#                measures.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from xml.etree.ElementTree import Element

from musicxml21.partwise import MxlShared
from musicxml21.partwise import Attributes
from musicxml21.partwise import Measure


@dataclass(frozen=True)
class Part:
    '''
    partId must match the partId of a ScorePart in the score's PartList.
    Measures constructed without a number are numbered by position (1-based).
    '''
    partId: str
    measures: tuple[Measure, ...] = ()

    def __post_init__(self) -> None:
        measures: list[Measure] = []
        for i, measure in enumerate(self.measures):
            if measure.number is None:
                measure = replace(measure, number=str(i + 1))
            measures.append(measure)
        object.__setattr__(self, 'measures', tuple(measures))

    def attributesInEffect(self) -> list[Attributes | None]:
        '''
        Returns, for each measure, the Attributes that apply to it: its own,
        or else the most recent ones from an earlier measure (None if no
        measure so far has had any).
        '''
        output: list[Attributes | None] = []
        current: Attributes | None = None
        for measure in self.measures:
            if measure.attributes is not None:
                current = measure.attributes
            output.append(current)
        return output

    def toElement(self) -> Element:
        elem = Element('part', {'id': self.partId})
        for measure in self.measures:
            elem.append(measure.toElement())
        return elem

    @classmethod
    def fromElement(cls, elem: Element) -> 'Part':
        return cls(
            partId=MxlShared.requiredAttrib(elem, 'id'),
            measures=tuple(Measure.fromElement(mEl) for mEl in elem.iterfind('measure')),
        )
