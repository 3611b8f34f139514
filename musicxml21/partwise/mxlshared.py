# ------------------------------------------------------------------------------
# Name:          mxlshared.py
# Purpose:       Shared ElementTree helpers for reading and writing MusicXML
#                elements (child lookup, typed text parsing, yes/no flags).
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from xml.etree.ElementTree import Element, SubElement

from musicxml21.partwise import MissingRequiredField
from musicxml21.partwise import MalformedValue

# Text Strings for Error Conditions
# -----------------------------------------------------------------------------
_MISSING_CHILD = 'Required <{}> element is missing from <{}>.'
_MISSING_ATTRIB = 'Required @{} attribute is missing from <{}>.'
_NOT_AN_INT = 'Expected an integer in <{}>, got "{}".'
_NOT_A_NUMBER = 'Expected a number in <{}>, got "{}".'
_NOT_YES_NO = 'Expected "yes" or "no" for {} in <{}>, got "{}".'
_OUT_OF_RANGE = '{} must be in range {}..{} (got {}).'
_NOT_IN_CHOICES = '{} must be one of {} (got "{}").'
_NOT_POSITIVE = '{} must be a positive integer (got {}).'
_NEGATIVE = '{} must not be negative (got {}).'

class MxlShared:
    @staticmethod
    def findChild(elem: Element, tag: str) -> Element | None:
        # direct children only, first match
        return elem.find(tag)

    @staticmethod
    def requiredChild(elem: Element, tag: str) -> Element:
        child: Element | None = elem.find(tag)
        if child is None:
            raise MissingRequiredField(_MISSING_CHILD.format(tag, elem.tag))
        return child

    @staticmethod
    def requiredText(elem: Element, tag: str, strip: bool = True) -> str:
        # strip=False for free text (names, voice ids), where spaces are content
        child: Element = MxlShared.requiredChild(elem, tag)
        text: str = child.text or ''
        return text.strip() if strip else text

    @staticmethod
    def optionalText(elem: Element, tag: str, strip: bool = True) -> str | None:
        child: Element | None = elem.find(tag)
        if child is None:
            return None
        text: str = child.text or ''
        return text.strip() if strip else text

    @staticmethod
    def parseInt(text: str, where: str) -> int:
        try:
            return int(text, 10)
        except ValueError:
            raise MalformedValue(_NOT_AN_INT.format(where, text))

    @staticmethod
    def parseNumber(text: str, where: str) -> float:
        try:
            return float(text)
        except ValueError:
            raise MalformedValue(_NOT_A_NUMBER.format(where, text))

    @staticmethod
    def parseYesNo(text: str, name: str, where: str) -> bool:
        if text == 'yes':
            return True
        if text == 'no':
            return False
        raise MalformedValue(_NOT_YES_NO.format(name, where, text))

    @staticmethod
    def requiredInt(elem: Element, tag: str) -> int:
        return MxlShared.parseInt(MxlShared.requiredText(elem, tag), tag)

    @staticmethod
    def optionalInt(elem: Element, tag: str) -> int | None:
        text: str | None = MxlShared.optionalText(elem, tag)
        if text is None:
            return None
        return MxlShared.parseInt(text, tag)

    @staticmethod
    def requiredAttrib(elem: Element, name: str) -> str:
        value: str | None = elem.get(name)
        if value is None:
            raise MissingRequiredField(_MISSING_ATTRIB.format(name, elem.tag))
        return value

    @staticmethod
    def optionalIntAttrib(elem: Element, name: str) -> int | None:
        value: str | None = elem.get(name)
        if value is None:
            return None
        return MxlShared.parseInt(value.strip(), f'{elem.tag} @{name}')

    @staticmethod
    def appendTextElement(parent: Element, tag: str, value) -> Element:
        child: Element = SubElement(parent, tag)
        child.text = str(value)
        return child

    @staticmethod
    def numberToString(value: float) -> str:
        # 1.0 -> '1', -0.5 -> '-0.5'
        if float(value).is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def checkRange(value: int, low: int, high: int, name: str) -> int:
        if not low <= value <= high:
            raise MalformedValue(_OUT_OF_RANGE.format(name, low, high, value))
        return value

    @staticmethod
    def checkChoice(value: str, choices: tuple[str, ...], name: str) -> str:
        if value not in choices:
            raise MalformedValue(_NOT_IN_CHOICES.format(name, ', '.join(choices), value))
        return value

    @staticmethod
    def checkPositive(value: int, name: str) -> int:
        if value < 1:
            raise MalformedValue(_NOT_POSITIVE.format(name, value))
        return value

    @staticmethod
    def checkNonNegative(value: int, name: str) -> int:
        if value < 0:
            raise MalformedValue(_NEGATIVE.format(name, value))
        return value
