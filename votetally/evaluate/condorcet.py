'''Condorcet ranking evaluators.

These evaluators work by examining pairwise orderings between candidates
(how many voters prefer one candidate to another). They take the weighted
ranked votes directly and count the pairwise preferences with
:func:`votetally.convert.pairwise_counts`, which accounts for shared tiers
and unranked candidates.
'''

import logging
from typing import Dict, Iterable, List, Tuple

import votetally.convert
import votetally.evaluate.core
import votetally.vote
from votetally.vote import Candidate, CandidateSet, Ranking, WeightedRankedVotes


logger = logging.getLogger(__name__)


def pairwise_wins(votes: Dict[Tuple[Candidate, Candidate], int],
                  include_ties: bool = False,
                  ) -> List[Tuple[Candidate, Candidate]]:
    """Select pairs of candidates where the first is preferred to the second.

    :param votes: Counts of candidate pairs (or path strengths between them).
        A missing pair counts as zero.
    :param include_ties: Whether to include pairs of candidates that are tied.
        Such a pair will be included in both directions.
    :returns: Ordered pairs from the input that are generally preferred to the
        opposite ranking.
    """
    wins = []
    for pair, count in votes.items():
        upper_cand, lower_cand = pair
        anti_count = votes.get((lower_cand, upper_cand), 0)
        if anti_count < count or include_ties and anti_count == count:
            wins.append(pair)
    return wins


class Schulze(votetally.evaluate.core.Evaluator):
    '''Schulze (beatpath) Condorcet ranking evaluator, winning votes variant.

    Also called Schwartz Sequential dropping or path voting. Finds paths
    between pairs of candidates in which each candidate pairwise beats the
    next, where the strength of a path is its weakest pairwise win measured
    by the number of winning votes. A candidate beats another if its
    strongest path to them is stronger than the strongest path back.

    Every candidate is ranked by the number of candidates that beat it, so
    candidates in an unresolved cycle share a rank. Candidates with equal
    ranks are listed in the order of their names.
    '''
    def __init__(self):
        self.validator = votetally.vote.RankedVoteValidator()

    def evaluate(self,
                 votes: WeightedRankedVotes,
                 candidates: CandidateSet,
                 ) -> Ranking:
        '''Rank candidates using the Schulze method.

        :param votes: Weighted ranked votes.
        :param candidates: All candidates of the election.
        :raises InvalidVoteError: If any of the votes is malformed, for
            example ranks a candidate twice.
        '''
        self.validate(votes)
        all_cands = sorted(candidates)
        if len(all_cands) <= 1:
            return [(cand, 0) for cand in all_cands]
        counts = votetally.convert.pairwise_counts(votes, all_cands)
        logger.debug('pairwise preference counts: %s', counts)
        paths = self.widest_paths(counts, all_cands)
        logger.debug('beat path strengths: %s', paths)
        n_beaten_by = {cand: 0 for cand in all_cands}
        for winner, loser in pairwise_wins(paths):
            n_beaten_by[loser] += 1
        ranking = sorted(n_beaten_by.items(), key=lambda item: (item[1], item[0]))
        logger.info('schulze ranking: %s', ranking)
        return ranking

    def validate(self, votes: WeightedRankedVotes) -> None:
        for vote, weight in votes:
            try:
                self.validator.validate(vote)
                self.validator.validate_weight(weight)
            except votetally.vote.DuplicateCandidateError as e:
                raise votetally.vote.InvalidVoteError(
                    f'Invalid vote was used, check that the vote does not list '
                    f'candidate {e.candidate!r} twice'
                ) from e

    @staticmethod
    def widest_paths(counts: Dict[Tuple[Candidate, Candidate], int],
                     candidates: Iterable[Candidate],
                     ) -> Dict[Tuple[Candidate, Candidate], int]:
        '''Compute the strongest (widest) beat paths between all candidates.

        :param counts: Pairwise preference counts.
        :param candidates: All candidates of the election.
        :returns: Path strengths for every ordered pair of distinct
            candidates; zero if there is no beat path.
        '''
        all_cands = list(candidates)
        paths = {}
        for cand1 in all_cands:
            for cand2 in all_cands:
                if cand1 != cand2:
                    count = counts.get((cand1, cand2), 0)
                    if counts.get((cand2, cand1), 0) < count:
                        paths[cand1, cand2] = count
                    else:
                        paths[cand1, cand2] = 0
        for cand_via in all_cands:
            for cand_from in all_cands:
                if cand_from != cand_via:
                    for cand_to in all_cands:
                        if cand_to not in (cand_from, cand_via):
                            paths[cand_from, cand_to] = max(
                                paths[cand_from, cand_to],
                                min(
                                    paths[cand_from, cand_via],
                                    paths[cand_via, cand_to],
                                )
                            )
        return paths
