"""Votetally - a small engine for tallying free-form ballots.

Votetally turns ballot text, one vote per line, into weighted ranked votes
and ranks the candidates by one of three methods:

-   **Plurality**, counting the first choices of the voters.
-   **Schulze Winning**, the Schulze beatpath method with pairwise wins
    measured by winning votes.
-   **Weighted Random**, a lottery drawing the first choices of the voters.

The ballot format is handled by :mod:`votetally.io.ballot`, the vote
representation and its errors live in :mod:`votetally.vote`, the views of
the votes needed by the methods are produced by :mod:`votetally.convert`
and the methods themselves are found in the :mod:`votetally.evaluate`
subpackage. :func:`votetally.system.tally` wires it all together.
"""
