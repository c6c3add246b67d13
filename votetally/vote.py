'''Vote type specifications and vote validators.

Votetally works with a single primary vote type, the **ranked** vote, which
is what every ballot line turns into:

-   **Ranked** votes - a tuple of ``(candidate, tier)`` pairs. Tiers are
    zero-based integers, lower tiers are more preferred, and candidates that
    share a tier are considered equal by the voter. Candidates missing from
    the vote are implicitly ranked below all of the listed ones.
-   **Unranked** votes - a ``(candidate, weight)`` pair derived from the
    first choice of a ranked vote. Used by the plurality and weighted random
    methods.

Votes travel together with their weight (the number of identical ballots
they stand for) as ``(vote, weight)`` pairs in a list that keeps the order of
the ballot lines.

If a vote is invalid, the functions that detect it raise a subclass of
:class:`VoteError`.
'''

import collections
from numbers import Integral
from typing import Any, Dict, FrozenSet, List, Tuple


Candidate = str
RankedVoteType = Tuple[Tuple[Candidate, int], ...]
WeightedRankedVotes = List[Tuple[RankedVoteType, int]]
UnrankedVoteType = Tuple[Candidate, int]
CandidateSet = FrozenSet[Candidate]
Ranking = List[Tuple[Candidate, int]]


class VoteError(Exception):
    '''A vote is invalid given the tallying rules.'''
    pass


class DuplicateCandidateError(VoteError):
    '''A candidate appears more than once within a single ranked vote.

    :param candidate: The repeated candidate.
    :param vote: The offending vote, if known.
    '''
    def __init__(self, candidate: Candidate, vote: Any = None):
        self.candidate = candidate
        self.vote = vote
        message = f'candidate {candidate!r} was used twice in a ranking'
        if vote is not None:
            message += f': {vote!r}'
        super().__init__(message)


class AmbiguousFirstChoiceError(VoteError):
    '''A vote has several candidates tied for the first choice.

    Raised when an unranked (first choice) projection of the vote is needed.

    :param vote: The offending vote.
    '''
    def __init__(self, vote: RankedVoteType):
        self.vote = vote
        firsts = ' = '.join(cand for cand, tier in vote if tier == 0)
        super().__init__(f'vote has more than one first choice: {firsts}')


class InvalidVoteError(VoteError):
    '''A ranked vote failed validation while being tallied.'''
    pass


class RankedVoteValidator:
    '''Validate a ranked vote (a tuple of candidate-tier pairs).

    The tallying functions accept votes from producers other than the ballot
    parser, so they re-validate the votes they receive with this.
    '''
    def validate(self, vote: RankedVoteType) -> None:
        '''Check if the ranked vote is well formed.

        :param vote: Ranked vote to be checked.
        :raises InvalidVoteError: If the vote is not a tuple of pairs or if
            any tier is not a non-negative integer.
        :raises DuplicateCandidateError: If any candidate is specified more
            than once in the ranking.
        '''
        if not isinstance(vote, tuple):
            raise InvalidVoteError(f'invalid vote type: {type(vote)}, must be {tuple}')
        seen = set()
        for item in vote:
            if not isinstance(item, tuple) or len(item) != 2:
                raise InvalidVoteError(f'invalid ranked vote item: {item!r}')
            cand, tier = item
            if isinstance(tier, bool) or not isinstance(tier, Integral) or tier < 0:
                raise InvalidVoteError(f'invalid tier for candidate {cand!r}: {tier!r}')
            if cand in seen:
                raise DuplicateCandidateError(cand, vote)
            seen.add(cand)

    def validate_weight(self, weight: Any) -> None:
        '''Check that the vote weight is a positive integer.

        :raises InvalidVoteError: If it is not.
        '''
        if isinstance(weight, bool) or not isinstance(weight, Integral) or weight <= 0:
            raise InvalidVoteError(f'invalid vote weight: {weight!r}, must be a positive integer')


def tiers(vote: RankedVoteType) -> Dict[Candidate, int]:
    '''Map candidates of a ranked vote to their tiers.'''
    return {cand: tier for cand, tier in vote}


def first_choices(vote: RankedVoteType) -> List[Candidate]:
    '''Return all candidates occupying the best (zero) tier of the vote.'''
    return [cand for cand, tier in vote if tier == 0]


def tier_groups(vote: RankedVoteType) -> Dict[int, List[Candidate]]:
    '''Group candidates of the vote by their tier, in ascending tier order.'''
    groups = collections.defaultdict(list)
    for cand, tier in vote:
        groups[tier].append(cand)
    return dict(sorted(groups.items()))
