'''Free-form ballot text format.

Every line of the text is a single vote, a ranking of candidates with an
optional weight::

    Strawberry > Apple > Banana
    Strawberry > Banana = Apple * 5
    Apple

``>`` separates a more preferred candidate from a less preferred one and
``=`` joins candidates the voter ranks equally. A trailing ``* N`` makes the
line count as N identical ballots. Any other character is a part of the
candidate name; whitespace around the names is ignored. Blank lines are
empty votes that count for nobody.

The loaded votes are a list of ``(ranked_vote, weight)`` pairs in the line
order, where the ranked vote is a tuple of ``(candidate, tier)`` pairs
(see :mod:`votetally.vote`).
'''

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Tuple

import votetally.io.core
import votetally.vote
from votetally.vote import Candidate, RankedVoteType, WeightedRankedVotes


logger = logging.getLogger(__name__)

RANK_DELIMITER = '>'
TIE_DELIMITER = '='
WEIGHT_DELIMITER = '*'
RESERVED_CHARS = frozenset((RANK_DELIMITER, TIE_DELIMITER, WEIGHT_DELIMITER))
RE_OPERATOR = re.compile(r'([*>=])')
RE_WEIGHT = re.compile(r'[0-9]+')


class NotSupportedInBallotFormat(votetally.io.core.NotSupportedInFormat):
    FORMAT = 'ballot text'


class BallotParseError(votetally.io.core.ParseError):
    '''A ballot line does not follow the ballot grammar.

    :param reason: What is wrong with the line.
    :param line: The offending line.
    :param line_no: One-based number of the line within the input.
    '''
    def __init__(self, reason: str, line: str, line_no: int):
        self.reason = reason
        self.line = line
        self.line_no = line_no
        super().__init__(
            f'Failed to parse votes on line {line_no}: {reason}: {line!r}'
        )


def _load(lines: Iterable[str]) -> WeightedRankedVotes:
    votes = []
    for line_no, line in enumerate(lines, start=1):
        votes.append(parse_vote_line(line, line_no))
    logger.info('parsed %d ballot lines', len(votes))
    return votes


load, loads = votetally.io.core.loaders(_load)


def parse_vote_line(line: str, line_no: int = 1) -> Tuple[RankedVoteType, int]:
    '''Parse a single ballot line into a weighted ranked vote.

    :param line: The ballot line, without the line terminator.
    :param line_no: Line number to report in errors.
    :returns: A ``(ranked_vote, weight)`` pair. Blank lines give an empty
        ranked vote with a weight of one.
    :raises BallotParseError: If the line is malformed.
    :raises DuplicateCandidateError: If a candidate is ranked twice.
    '''
    chunks = RE_OPERATOR.split(line)
    # chunks alternate between literal text and operators:
    # [text, op, text, op, ..., text]
    texts = [chunk.strip() for chunk in chunks[::2]]
    operators = chunks[1::2]
    if not operators and not texts[0]:
        return tuple(), 1
    weight = 1
    if WEIGHT_DELIMITER in operators:
        if operators.count(WEIGHT_DELIMITER) > 1:
            raise BallotParseError("more than one '*' weight mark", line, line_no)
        elif operators[-1] != WEIGHT_DELIMITER:
            raise BallotParseError("stray '*' before the end of the ranking", line, line_no)
        weight = _parse_weight(texts.pop(), line, line_no)
        operators.pop()
    return _parse_ranking(texts, operators, line, line_no), weight


def _parse_weight(weight_str: str, line: str, line_no: int) -> int:
    if not weight_str:
        raise BallotParseError("stray '*' without a vote weight", line, line_no)
    elif not RE_WEIGHT.fullmatch(weight_str):
        raise BallotParseError(f'invalid vote weight {weight_str!r}', line, line_no)
    weight = int(weight_str)
    if weight <= 0:
        raise BallotParseError(f'vote weight must be positive, got {weight_str!r}', line, line_no)
    return weight


def _parse_ranking(names: List[str],
                   operators: List[str],
                   line: str,
                   line_no: int,
                   ) -> RankedVoteType:
    for i, name in enumerate(names):
        if not name:
            if i < len(operators):
                stray = operators[i]
            else:
                stray = operators[i-1] if operators else WEIGHT_DELIMITER
            raise BallotParseError(f'stray {stray!r} without a candidate', line, line_no)
    tier = 0
    ranking = [(names[0], tier)]
    for operator, name in zip(operators, names[1:]):
        if operator == RANK_DELIMITER:
            tier += 1
        ranking.append((name, tier))
    seen = set()
    for cand, tier in ranking:
        if cand in seen:
            raise votetally.vote.DuplicateCandidateError(cand, line)
        seen.add(cand)
    return tuple(ranking)


def _dump(votes: WeightedRankedVotes) -> Iterable[str]:
    for vote, weight in votes:
        vote_str = _dump_ranked_vote(vote)
        if weight == 1:
            yield vote_str
        elif not vote_str:
            raise NotSupportedInBallotFormat(f'weight {weight} of an empty vote')
        else:
            yield f'{vote_str} {WEIGHT_DELIMITER} {_dump_weight(weight)}'


dump, dumps = votetally.io.core.dumpers(_dump)


def _dump_ranked_vote(vote: RankedVoteType) -> str:
    return f' {RANK_DELIMITER} '.join(
        f' {TIE_DELIMITER} '.join(_dump_candidate(cand) for cand in group)
        for group in votetally.vote.tier_groups(vote).values()
    )


def _dump_candidate(candidate: Candidate) -> str:
    cand_str = str(candidate)
    if not cand_str:
        raise NotSupportedInBallotFormat('empty candidate name')
    elif RESERVED_CHARS.intersection(cand_str):
        raise NotSupportedInBallotFormat(f'reserved character in candidate name: {cand_str!r}')
    elif cand_str != cand_str.strip() or '\n' in cand_str or '\r' in cand_str:
        raise NotSupportedInBallotFormat(f'surrounding or line break whitespace in candidate name: {cand_str!r}')
    return cand_str


def _dump_weight(weight: int) -> str:
    if isinstance(weight, int) and not isinstance(weight, bool) and weight > 0:
        return str(weight)
    else:
        raise NotSupportedInBallotFormat(f'invalid vote weight: {weight!r}')
