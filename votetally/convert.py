'''Converters between vote formats.

The tallying methods take in different views of the same weighted ranked
votes: plurality and weighted random only look at the first choice of each
vote (use :func:`to_unranked`), while Schulze works with counts of pairwise
preferences (use :func:`pairwise_counts`).
'''

import collections
from typing import Dict, Iterable, List, Tuple

import votetally.vote
from votetally.vote import Candidate, CandidateSet, UnrankedVoteType, \
    WeightedRankedVotes


def to_unranked(votes: WeightedRankedVotes) -> List[UnrankedVoteType]:
    '''Aggregate ranked votes to simple votes, taking each voter's first choice.

    Empty votes are dropped. The order of the votes is kept.

    :param votes: Weighted ranked votes.
    :returns: ``(candidate, weight)`` pairs, one per non-empty vote.
    :raises AmbiguousFirstChoiceError: If any vote ranks more than one
        candidate first.
    '''
    unranked = []
    for vote, weight in votes:
        firsts = votetally.vote.first_choices(vote)
        if len(firsts) > 1:
            raise votetally.vote.AmbiguousFirstChoiceError(vote)
        elif firsts:
            unranked.append((firsts[0], weight))
    return unranked


def consolidate(votes: Iterable[UnrankedVoteType]) -> Dict[Candidate, int]:
    '''Sum the weights of simple votes per candidate.'''
    totals = collections.defaultdict(int)
    for cand, weight in votes:
        totals[cand] += weight
    return dict(totals)


def candidates(votes: WeightedRankedVotes) -> CandidateSet:
    '''Return all candidates appearing at any tier of any of the votes.

    A candidate that nobody mentions cannot be inferred from the votes and
    is therefore never a part of the result.
    '''
    return frozenset(cand for vote, weight in votes for cand, tier in vote)


def pairwise_counts(votes: WeightedRankedVotes,
                    candidates: Iterable[Candidate],
                    ) -> Dict[Tuple[Candidate, Candidate], int]:
    '''Aggregate ranked votes to counts of pairwise wins.

    For each vote that ranks candidate A strictly better than candidate B,
    adds the vote weight to the count of A over B. Candidates not ranked by a
    vote are considered as ranked together below all ranked ones; candidates
    that share a tier (including the unranked ones) count for neither side.

    :param votes: Weighted ranked votes; assumed to be valid.
    :param candidates: All candidates of the election.
    :returns: A mapping of candidate pairs to counts. Pairs with no voter
        preferring the first candidate to the second are omitted.
    '''
    all_cands = list(candidates)
    counts = collections.defaultdict(int)
    for vote, weight in votes:
        vote_tiers = votetally.vote.tiers(vote)
        unranked_tier = max(vote_tiers.values(), default=-1) + 1
        for upper_cand, upper_tier in vote_tiers.items():
            for lower_cand in all_cands:
                if vote_tiers.get(lower_cand, unranked_tier) > upper_tier:
                    counts[upper_cand, lower_cand] += weight
    return dict(counts)
