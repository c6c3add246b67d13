'''Various utility functions for other modules of Votetally.

There should normally be no need to use these functions directly.
'''

from typing import Any, Callable, Dict, List, Tuple

from votetally.vote import Candidate, Ranking


def sorted_votes(votes: Dict[Candidate, int],
                 descending: bool = True,
                 ) -> List[Tuple[Candidate, int]]:
    '''Return votes items sorted by value, then by candidate name.

    The name always sorts ascending so that equal values come out in the
    same order regardless of the input dictionary order.
    '''
    sign = -1 if descending else 1
    return sorted(votes.items(), key=lambda item: (sign * item[1], item[0]))


def competition_ranking(ordered: List[Tuple[Candidate, Any]]) -> Ranking:
    '''Assign standard competition ranks to candidates already in order.

    Candidates with equal keys share a rank; the next distinct key gets the
    rank equal to its position (so ranks go 0, 0, 2, ...).

    :param ordered: Candidate-key pairs sorted so that better keys go first.
    '''
    ranking = []
    last_key = None
    rank = 0
    for i, (cand, key) in enumerate(ordered):
        if i == 0 or key != last_key:
            rank = i
            last_key = key
        ranking.append((cand, rank))
    return ranking


def draw_weighted_order(weights: Dict[Candidate, int],
                        randint: Callable[[int, int], int],
                        ) -> List[Candidate]:
    '''Order all candidates by repeated weighted draws without replacement.

    The candidates are walked in the order of their names; each draw picks
    an integer from ``1`` to the remaining total weight (inclusive) and
    selects the candidate whose cumulative weight interval contains it.

    :param weights: Positive integer weights of the candidates.
    :param randint: Uniform integer generator with inclusive bounds,
        such as :meth:`random.Random.randint`.
    '''
    pool = sorted(weights.items())
    chosen = []
    while pool:
        total = sum(weight for cand, weight in pool)
        roll = randint(1, total)
        if not 1 <= roll <= total:
            raise ValueError(f'random draw {roll} out of range 1..{total}')
        found_i = 0
        while roll > pool[found_i][1]:
            roll -= pool[found_i][1]
            found_i += 1
        chosen.append(pool.pop(found_i)[0])
    return chosen
