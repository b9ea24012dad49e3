from pathlib import Path

import pytest

from lispy.sexpr.grammar import SexprGrammar

data_dir = Path(__file__).parent / 'data'


@pytest.fixture()
def unbounded():
    yield SexprGrammar()


@pytest.fixture()
def shallow():
    yield SexprGrammar(max_depth=2)


@pytest.fixture()
def lines_file():
    yield data_dir / 'lines.txt'
