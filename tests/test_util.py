import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votetally.util


def test_sorted_votes_tiebreak_by_name():
    votes = {'C': 2, 'B': 5, 'A': 2, 'D': 1}
    assert votetally.util.sorted_votes(votes) == [
        ('B', 5), ('A', 2), ('C', 2), ('D', 1),
    ]
    assert votetally.util.sorted_votes(votes, descending=False) == [
        ('D', 1), ('A', 2), ('C', 2), ('B', 5),
    ]


def test_competition_ranking():
    assert votetally.util.competition_ranking(
        [('A', 5), ('B', 5), ('C', 3), ('D', 3), ('E', 1)]
    ) == [('A', 0), ('B', 0), ('C', 2), ('D', 2), ('E', 4)]
    assert votetally.util.competition_ranking([]) == []


def test_draw_weighted_order():
    draws = iter([4, 1])
    order = votetally.util.draw_weighted_order(
        {'B': 3, 'A': 1}, lambda low, high: next(draws)
    )
    # pool is A (1) then B (2..4); a draw of 4 picks B, then only A is left
    assert order == ['B', 'A']
