"""
Utils for testing.
"""


class Counted:
    """When (doc)testing memoization, we want to know how often a plain (non-memoized) selector has actually been
    called. Counted wraps such a selector and counts the calls.

    >>> select_a = Counted(lambda state: state['a'], 'select_a')
    >>> select_a({'a': 1}), select_a({'a': 2})
    (1, 2)
    >>> select_a.calls
    2
    """

    def __init__(self, f, name=None):
        self.f = f
        self.calls = 0
        if name is not None:
            self.display_name = name

    def __call__(self, state):
        self.calls += 1
        return self.f(state)
