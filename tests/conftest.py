import pytest

from chaos.datatypes import Point


class ScriptedChoices:
    """Random source that hands out a fixed sequence of vertex indices."""

    def __init__(self, choices):
        self.choices = list(choices)
        self.position = 0

    def integers(self, low, high, size=None):
        count = 1 if size is None else size
        picked = self.choices[self.position:self.position + count]
        if len(picked) < count:
            raise AssertionError("Ran out of scripted choices.")
        self.position += count
        assert all(low <= choice < high for choice in picked)
        return picked[0] if size is None else picked


@pytest.fixture
def triangle():
    return [Point(100.0, 100.0), Point(0.0, 0.0), Point(200.0, 0.0)]


@pytest.fixture
def scripted():
    return ScriptedChoices
