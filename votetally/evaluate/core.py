'''General tallying evaluator machinery and the plurality evaluator.'''

from __future__ import annotations

import abc
import logging
from typing import List

import votetally.convert
import votetally.util
from votetally.vote import CandidateSet, Ranking, UnrankedVoteType


logger = logging.getLogger(__name__)


class Evaluator(metaclass=abc.ABCMeta):
    '''Evaluate votes for candidates and rank the candidates.

    A root abstract base class for all evaluators. Evaluators return
    a ranking - a list of ``(candidate, rank)`` pairs ordered from the
    best candidate, with zero-based ranks shared by tied candidates.
    '''
    @abc.abstractmethod
    def evaluate(self, votes, *args, **kwargs) -> Ranking:
        '''Rank the candidates by the votes.'''
        raise NotImplementedError


class Plurality(Evaluator):
    '''Plurality voting evaluator. Ranks candidates by their vote totals.

    Each vote counts for a single candidate (the voter's first choice if the
    votes were ranked; use :func:`votetally.convert.to_unranked`). The
    candidates are ranked in descending order of the total weight of their
    votes. Candidates with equal totals share a rank, using standard
    competition ranking (a candidate's rank is the number of candidates with
    a strictly higher total), and are listed in the order of their names.
    Candidates with no votes are left out of the ranking.
    '''

    def evaluate(self,
                 votes: List[UnrankedVoteType],
                 candidates: CandidateSet = frozenset(),
                 ) -> Ranking:
        '''Rank candidates by plurality voting.

        :param votes: Simple votes as ``(candidate, weight)`` pairs.
        :param candidates: All candidates of the election. Those that did not
            receive any votes do not appear in the result.
        :returns: A ranking of the candidates with nonzero totals.
        '''
        totals = {cand: 0 for cand in candidates}
        totals.update(votetally.convert.consolidate(votes))
        supported = {cand: total for cand, total in totals.items() if total > 0}
        logger.debug('plurality totals: %s', supported)
        return votetally.util.competition_ranking(
            votetally.util.sorted_votes(supported)
        )
