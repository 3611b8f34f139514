# ------------------------------------------------------------------------------
# Name:          mxlscore.py
# Purpose:       <score-partwise>: the root of the document, a part-list
#                followed by the parts.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from dataclasses import dataclass
from xml.etree.ElementTree import Element

from musicxml21.partwise import MxlShared
from musicxml21.partwise import InstrumentIdPolicy
from musicxml21.partwise import DEFAULT_ID_POLICY
from musicxml21.partwise import PartList
from musicxml21.partwise import Part

SCORE_PARTWISE: str = 'score-partwise'
DEFAULT_MUSICXML_VERSION: str = '4.0'


@dataclass(frozen=True)
class Score:
    '''
    A score-partwise document.  Parts should correspond 1:1 (by id) with the
    ScoreParts in partList; this is not enforced, see unmatchedPartIds().
    '''
    partList: PartList
    parts: tuple[Part, ...] = ()
    version: str | None = DEFAULT_MUSICXML_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, 'parts', tuple(self.parts))

    def partFor(self, partId: str) -> Part | None:
        for part in self.parts:
            if part.partId == partId:
                return part
        return None

    def unmatchedPartIds(self) -> list[str]:
        '''
        Returns the ids that appear in only one of partList and parts, in
        document order (part-list first).
        '''
        scorePartIds: list[str] = self.partList.partIds
        partIds: list[str] = [part.partId for part in self.parts]
        output: list[str] = [pid for pid in scorePartIds if pid not in partIds]
        output.extend(pid for pid in partIds if pid not in scorePartIds)
        return output

    def toElement(self, policy: InstrumentIdPolicy = DEFAULT_ID_POLICY) -> Element:
        elem = Element(SCORE_PARTWISE)
        if self.version is not None:
            elem.set('version', self.version)
        elem.append(self.partList.toElement(policy))
        for part in self.parts:
            elem.append(part.toElement())
        return elem

    @classmethod
    def fromElement(
        cls,
        elem: Element,
        policy: InstrumentIdPolicy = DEFAULT_ID_POLICY
    ) -> 'Score':
        return cls(
            partList=PartList.fromElement(MxlShared.requiredChild(elem, 'part-list'), policy),
            parts=tuple(Part.fromElement(partEl) for partEl in elem.iterfind('part')),
            version=elem.get('version'),
        )
