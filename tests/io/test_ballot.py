# coding: utf8

import sys
import os
import io

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import votetally.io.ballot
import votetally.io.core
import votetally.vote


LINES_EXPECTED = {
    'Apple': ((('Apple', 0),), 1),
    '  Strawberry   ': ((('Strawberry', 0),), 1),
    'A > B > C': ((('A', 0), ('B', 1), ('C', 2)), 1),
    'A>B>C': ((('A', 0), ('B', 1), ('C', 2)), 1),
    'A = B > C': ((('A', 0), ('B', 0), ('C', 1)), 1),
    'A > B = C * 3': ((('A', 0), ('B', 1), ('C', 1)), 3),
    'Strawberry > Banana = Apple * 5': (
        (('Strawberry', 0), ('Banana', 1), ('Apple', 1)), 5
    ),
    'X * 5': ((('X', 0),), 5),
    'X*12': ((('X', 0),), 12),
    'X * 007': ((('X', 0),), 7),
    'Sue Ye (蘇業) > Doña García Márquez': (
        (('Sue Ye (蘇業)', 0), ('Doña García Márquez', 1)), 1
    ),
    'New York City > new york city': (
        (('New York City', 0), ('new york city', 1)), 1
    ),
    '': (tuple(), 1),
    '    ': (tuple(), 1),
}

FAILS = [
    '> A',    # no candidate before rank mark
    'A >',    # no candidate after rank mark
    'A >> B',    # missing candidate between marks
    'A > = B',    # missing candidate between marks
    '=',
    '*',
    '* 3',    # weight without a vote
    'A *',    # missing weight
    'A * 0',    # zero weight
    'A * 00',
    'A * -1',    # negative weight
    'A * +2',
    'A * 1.5',    # non-integer weight
    'A * x',
    'A * 1 0',
    'A * 2 * 3',    # two weights
    'A * 2 > B',    # weight before the end
    'A * > B',
    'A = B *',
]

DUPLICATES = [
    'A > A',
    'A = A',
    'A > B > A * 2',
    ' A > B =A ',
]


@pytest.mark.parametrize('line', list(LINES_EXPECTED.keys()))
def test_parse_line(line):
    assert votetally.io.ballot.parse_vote_line(line) == LINES_EXPECTED[line]


@pytest.mark.parametrize('line', FAILS)
def test_parse_fail(line):
    with pytest.raises(votetally.io.core.ParseError):
        votetally.io.ballot.loads(line)


@pytest.mark.parametrize('line', DUPLICATES)
def test_parse_duplicate(line):
    with pytest.raises(votetally.vote.DuplicateCandidateError):
        votetally.io.ballot.loads(line)


def test_parse_error_line_number():
    with pytest.raises(votetally.io.ballot.BallotParseError) as excinfo:
        votetally.io.ballot.loads('A > B\nB >\nC')
    assert excinfo.value.line_no == 2
    assert excinfo.value.line == 'B >'
    assert 'line 2' in str(excinfo.value)


def test_loads_keeps_line_order_and_blanks():
    assert votetally.io.ballot.loads('A\n\nB > C * 2') == [
        ((('A', 0),), 1),
        (tuple(), 1),
        ((('B', 0), ('C', 1)), 2),
    ]


def test_loads_crlf():
    assert votetally.io.ballot.loads('A > B\r\nB\r\n') == [
        ((('A', 0), ('B', 1)), 1),
        ((('B', 0),), 1),
    ]


def test_loads_empty():
    assert votetally.io.ballot.loads('') == []
    assert votetally.io.ballot.loads('\n') == [(tuple(), 1)]


def test_load_file():
    infile = io.StringIO('Apple\nApple * 2\r\nBanana > Apple\n')
    assert votetally.io.ballot.load(infile) == [
        ((('Apple', 0),), 1),
        ((('Apple', 0),), 2),
        ((('Banana', 0), ('Apple', 1)), 1),
    ]


DUMPABLE = [
    ((('A', 0), ('B', 1), ('C', 1)), 3),
    ((('D', 0),), 1),
    (tuple(), 1),
    ((('Sue Ye (蘇業)', 0), ('Doña García Márquez', 0)), 27),
]


def test_dumps():
    assert votetally.io.ballot.dumps(DUMPABLE[:2]) == 'A > B = C * 3\nD\n'


def test_dump_load_roundtrip():
    outfile = io.StringIO()
    votetally.io.ballot.dump(outfile, DUMPABLE)
    outfile.seek(0)
    assert votetally.io.ballot.load(outfile) == DUMPABLE
    assert votetally.io.ballot.loads(votetally.io.ballot.dumps(DUMPABLE)) == DUMPABLE


def test_dump_closes_tier_gaps():
    assert votetally.io.ballot.dumps([((('A', 0), ('B', 3)), 1)]) == 'A > B\n'


@pytest.mark.parametrize('votes', [
    [((('A>B', 0),), 1)],
    [((('A*', 0),), 1)],
    [(((' A', 0),), 1)],
    [((('', 0),), 1)],
    [(tuple(), 2)],
    [((('A', 0),), 0)],
])
def test_dump_fail(votes):
    with pytest.raises(votetally.io.ballot.NotSupportedInBallotFormat):
        votetally.io.ballot.dumps(votes)
