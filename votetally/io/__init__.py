"""Input/output of votes, most importantly the free-form ballot text.

This subpackage is structured into modules by format. Its root namespace
contains some general-purpose functions to transform other vote definitions
into the standard of Votetally.
"""

import collections
from typing import Union, FrozenSet, Tuple

import votetally.vote
from votetally.vote import Candidate, RankedVoteType, DuplicateCandidateError


GroupedRankingType = Tuple[Union[Candidate, FrozenSet[Candidate]], ...]


def tiers_from_ranked(ranking: GroupedRankingType) -> RankedVoteType:
    '''Transform an ordering of candidates (grouped ranking) to tiers.

    :param ranking: A sequence of candidates in the order of preference.
        Candidates sharing a rank are grouped into a set; these sets are
        expanded in the order of their candidates' names.
    :returns: A ranked vote - a tuple of ``(candidate, tier)`` pairs with
        the tier being the position of the candidate (or its group) in the
        input ordering.
    :raises DuplicateCandidateError: If any candidate is ranked twice.
    '''
    vote = []
    seen = set()
    for tier, item in enumerate(ranking):
        if isinstance(item, collections.abc.Set):
            cands = sorted(item)
        else:
            cands = [item]
        for cand in cands:
            if cand in seen:
                raise DuplicateCandidateError(cand, ranking)
            seen.add(cand)
            vote.append((cand, tier))
    return tuple(vote)


def ranked_from_tiers(vote: RankedVoteType) -> GroupedRankingType:
    '''Transform a ranked vote to an ordering of candidates.

    Skipped tiers (e.g. tiers 0, 2, 3) are closed up since only the relative
    order of the tiers matters.

    :param vote: A ranked vote (tuple of candidate-tier pairs).
    :returns: A sequence of candidates in the order of their tiers.
        Candidates sharing a tier are grouped into a frozen set.
    '''
    return tuple(
        frozenset(group) if len(group) > 1 else group[0]
        for group in votetally.vote.tier_groups(vote).values()
    )
