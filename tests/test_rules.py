import pytest

from blockfall.game import ScoringRules


@pytest.mark.parametrize("lines,points", [(0, 0), (1, 100), (2, 300), (3, 500), (4, 800), (5, 0), (-1, 0)])
def test_score_lookup(lines, points):
    assert ScoringRules().score_for_lines(lines) == points
