# ------------------------------------------------------------------------------
# Purpose:       musicxml21 command line: parse a MusicXML score-partwise file,
#                summarize it, and optionally write it back out.
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
#
import argparse
import sys
import typing as t

from music21.base import VERSION_STR

from musicxml21.partwise import MusicXMLError
from musicxml21.partwise import MxlWriter
from musicxml21.partwise import Score
from musicxml21.partwise import parseDocument
from musicxml21.partwise import readDocument
from musicxml21.partwise import writeDocument

def summarize(score: Score) -> list[str]:
    lines: list[str] = []
    for part in score.parts:
        scorePart = score.partList.scorePartFor(part.partId)
        name: str = scorePart.name if scorePart is not None else '?'
        numNotes: int = sum(len(m.notes) for m in part.measures)
        lines.append(
            f'{part.partId} ({name}): {len(part.measures)} measures, {numNotes} notes'
        )
    return lines

def main(argv: t.Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='python3 -m musicxml21',
        description='Read (and optionally rewrite) a MusicXML score-partwise file'
    )
    parser.add_argument('input_file',
                        help='input MusicXML file (or - to read from stdin)')
    parser.add_argument('output_file', nargs='?', default=None,
                        help='output MusicXML file (or - to write to stdout)')
    parser.add_argument('-s', '--summary', action='store_true', default=False,
                        help='print a summary of the parts to stderr')
    parser.add_argument('--no-doctype', action='store_true', default=False,
                        help='leave out the <!DOCTYPE> when writing')

    args = parser.parse_args(argv)

    try:
        score: Score
        if args.input_file == '-':
            score = parseDocument(sys.stdin.read())
        else:
            score = readDocument(args.input_file)
    except (MusicXMLError, OSError) as e:
        print(f'Failed to read {args.input_file}: {e}', file=sys.stderr)
        return 1

    if args.summary:
        print('music21 version:', VERSION_STR, file=sys.stderr)
        for line in summarize(score):
            print(line, file=sys.stderr)

    if args.output_file == '-':
        writer = MxlWriter(score)
        writer.includeDoctype = not args.no_doctype
        writer.write(sys.stdout)
    elif args.output_file is not None:
        writeDocument(score, args.output_file, includeDoctype=not args.no_doctype)
        print('Success!  Output can be found in', args.output_file, file=sys.stderr)

    return 0


# main entry point (parse arguments and do conversion)
if __name__ == "__main__":
    sys.exit(main())
