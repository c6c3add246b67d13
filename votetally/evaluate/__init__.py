'''Evaluate the results of the elections.

Every evaluator ranks the candidates: it returns a list of
``(candidate, rank)`` pairs ordered from the best, with zero-based ranks.
Candidates that the evaluator cannot tell apart share a rank and are listed
in the order of their names, so that the output does not depend on the order
of the votes.

The evaluators differ in the votes they take in. :class:`core.Plurality`
and :class:`auxiliary.WeightedRandom` take simple (first choice) votes, while
:class:`condorcet.Schulze` takes the full weighted ranked votes. Use the
:mod:`votetally.system` module to run the whole pipeline from ballot text.
'''

from votetally.evaluate.core import *    # noqa
