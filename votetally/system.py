'''Named tallying methods and the ballot-to-ranking pipeline.

The available methods form a closed set, the :class:`Method` enumeration;
use :func:`tally` to parse ballot text and rank the candidates by any of
them in one go.
'''

import enum
import logging
from typing import Callable, Optional

import votetally.convert
import votetally.io.ballot
from votetally.evaluate.auxiliary import WeightedRandom
from votetally.evaluate.condorcet import Schulze
from votetally.evaluate.core import Plurality
from votetally.vote import Ranking, WeightedRankedVotes


logger = logging.getLogger(__name__)


class UnknownMethodError(ValueError):
    '''The tallying method identifier is not one of the known methods.'''
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f'unknown voting method {name!r}, available: '
            + ', '.join(repr(method.value) for method in Method)
        )


class Method(enum.Enum):
    '''Tallying methods, valued by their canonical display names.'''
    PLURALITY = 'Plurality'
    SCHULZE_WINNING = 'Schulze Winning'
    WEIGHTED_RANDOM = 'Weighted Random'

    @classmethod
    def parse(cls, name: str) -> 'Method':
        '''Return the method with the given canonical name (exact match).

        :raises UnknownMethodError: If there is no such method.
        '''
        for method in cls:
            if method.value == name:
                return method
        raise UnknownMethodError(name)

    def __str__(self) -> str:
        return self.value


class VotingSystem:
    """A named voting system. Wraps an election evaluator.

    :param method: Tallying method of the system (a :class:`Method` or its
        canonical name).
    :param seed: Seed for the random generator of the weighted random method.
    :param randint: Random integer generator for the weighted random method;
        see :class:`votetally.evaluate.auxiliary.WeightedRandom`.
    """
    def __init__(self,
                 method: Method,
                 seed: Optional[int] = None,
                 randint: Optional[Callable[[int, int], int]] = None,
                 ):
        if not isinstance(method, Method):
            method = Method.parse(method)
        self.method = method
        self.name = method.value
        if method is Method.PLURALITY:
            self.evaluator = Plurality()
        elif method is Method.SCHULZE_WINNING:
            self.evaluator = Schulze()
        else:
            self.evaluator = WeightedRandom(seed=seed, randint=randint)

    def evaluate(self, votes: WeightedRankedVotes) -> Ranking:
        """Rank the candidates of the weighted ranked votes.

        :raises VoteError: If the votes are not valid for the method.
        """
        candidates = votetally.convert.candidates(votes)
        logger.info('ranking %d candidates by %s', len(candidates), self.name)
        if self.method is Method.SCHULZE_WINNING:
            return self.evaluator.evaluate(votes, candidates)
        elif self.method is Method.PLURALITY:
            return self.evaluator.evaluate(
                votetally.convert.to_unranked(votes), candidates
            )
        else:
            return self.evaluator.evaluate(votetally.convert.to_unranked(votes))


def tally(raw_votes: str,
          method: str,
          seed: Optional[int] = None,
          randint: Optional[Callable[[int, int], int]] = None,
          ) -> Ranking:
    '''Parse ballot text and rank the candidates by the given method.

    :param raw_votes: Ballot text, one vote per line; see
        :mod:`votetally.io.ballot` for the format.
    :param method: Canonical name of the tallying method (``Plurality``,
        ``Schulze Winning`` or ``Weighted Random``) or a :class:`Method`.
    :param seed: Seed for the weighted random method.
    :param randint: Random integer generator for the weighted random method.
    :returns: A list of ``(candidate, rank)`` pairs, best first, with
        zero-based ranks.
    :raises votetally.io.core.ParseError: If the ballot text is malformed.
    :raises votetally.vote.VoteError: If a vote is invalid for the method.
    :raises UnknownMethodError: If the method is not known.
    '''
    votes = votetally.io.ballot.loads(raw_votes)
    system = VotingSystem(method, seed=seed, randint=randint)
    return system.evaluate(votes)
