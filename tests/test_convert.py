import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votetally.convert
import votetally.vote


RANKED = [
    ((('A', 0), ('B', 1)), 2),
    (tuple(), 1),
    ((('C', 0), ), 1),
    ((('A', 0), ('C', 1), ('B', 1)), 3),
]


def test_to_unranked():
    assert votetally.convert.to_unranked(RANKED) == [
        ('A', 2), ('C', 1), ('A', 3),
    ]


def test_to_unranked_no_first_tier():
    # votes from other producers need not start at tier zero
    assert votetally.convert.to_unranked([((('A', 1), ), 4)]) == []


def test_to_unranked_ambiguous():
    with pytest.raises(votetally.vote.AmbiguousFirstChoiceError):
        votetally.convert.to_unranked(RANKED + [((('A', 0), ('B', 0)), 1)])


def test_consolidate():
    assert votetally.convert.consolidate(
        [('A', 2), ('B', 1), ('A', 3)]
    ) == {'A': 5, 'B': 1}
    assert votetally.convert.consolidate([]) == {}


def test_candidates():
    assert votetally.convert.candidates(RANKED) == frozenset('ABC')
    assert votetally.convert.candidates([(tuple(), 1)]) == frozenset()


def test_pairwise_counts_ties():
    votes = [
        ((('A', 0), ('B', 1)), 1),
        ((('B', 0), ('A', 1)), 1),
        ((('A', 0), ('B', 0)), 1),
    ]
    assert votetally.convert.pairwise_counts(votes, 'AB') == {
        ('A', 'B'): 1,
        ('B', 'A'): 1,
    }


def test_pairwise_counts_unranked_at_bottom():
    votes = [
        ((('A', 0), ), 2),
        ((('B', 0), ('C', 1)), 1),
        (tuple(), 5),
    ]
    assert votetally.convert.pairwise_counts(votes, 'ABC') == {
        ('A', 'B'): 2,
        ('A', 'C'): 2,
        ('B', 'C'): 1,
        ('B', 'A'): 1,
        ('C', 'A'): 1,
    }


def test_pairwise_counts_weights():
    single = votetally.convert.pairwise_counts([((('A', 0), ('B', 1)), 5)], 'AB')
    multiple = votetally.convert.pairwise_counts([((('A', 0), ('B', 1)), 1)] * 5, 'AB')
    assert single == multiple == {('A', 'B'): 5}
