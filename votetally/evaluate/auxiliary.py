'''Random evaluators.

You can make the random evaluators outputs stable if you give them a seed for
the random generator, or substitute the generator altogether, but be careful
with that in a real-world setting.
'''

import logging
import random
from typing import Callable, List, Optional

import votetally.convert
import votetally.evaluate.core
import votetally.util
from votetally.vote import Ranking, UnrankedVoteType


logger = logging.getLogger(__name__)


class WeightedRandom(votetally.evaluate.core.Evaluator):
    '''Rank candidates by drawing random simple ballots from the tally.

    Also known as a lottery or random ballot. Candidates are drawn one by one
    without replacement, each with a probability proportional to the total
    weight of its votes among the candidates not drawn yet; the order of the
    draws is the ranking. Every candidate with any votes gets a distinct
    rank.

    :param seed: Seed for the random generator that performs the sampling.
        A new generator is created for each evaluation, so a fixed seed gives
        the same ranking every time.
    :param randint: A uniform random integer generator taking inclusive
        bounds, like :meth:`random.Random.randint`. Overrides the seed.
    '''
    def __init__(self,
                 seed: Optional[int] = None,
                 randint: Optional[Callable[[int, int], int]] = None,
                 ):
        self.seed = seed
        self.randint = randint
        self.stable = (self.seed is not None or self.randint is not None)

    def evaluate(self, votes: List[UnrankedVoteType]) -> Ranking:
        '''Rank candidates by drawing random ballots.

        :param votes: Simple votes as ``(candidate, weight)`` pairs.
        '''
        randint = self.randint
        if randint is None:
            randint = random.Random(self.seed).randint
        weights = {
            cand: weight
            for cand, weight in votetally.convert.consolidate(votes).items()
            if weight > 0
        }
        logger.debug('lottery weights: %s', weights)
        drawn = votetally.util.draw_weighted_order(weights, randint)
        logger.info('lottery draw order: %s', drawn)
        return [(cand, rank) for rank, cand in enumerate(drawn)]
