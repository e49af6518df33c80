import pytest

from poker_rank.eval.scorer import HandScorer
from poker_rank.tables.build import build_tables


@pytest.fixture(scope="session")
def tables():
    return build_tables()


@pytest.fixture(scope="session")
def scorer(tables):
    return HandScorer(tables)
