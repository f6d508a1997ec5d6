"""Deterministic stand-in for random.Random used across the domain tests."""


class ScriptedRandom:
    """Returns queued values; defaults mean 'nothing random happens'."""

    def __init__(self, floats=None, ints=None):
        self.floats = list(floats or [])
        self.ints = list(ints or [])
        self.float_calls = 0
        self.randrange_bounds = []

    def random(self):
        self.float_calls += 1
        return self.floats.pop(0) if self.floats else 0.99

    def randrange(self, n):
        self.randrange_bounds.append(n)
        value = self.ints.pop(0) if self.ints else 0
        assert 0 <= value < n
        return value

    def choice(self, seq):
        return seq[self.randrange(len(seq))]
