"""
A Query is handed to a selector's selection logic for the duration of a single computation. Calling it with another
selector invokes that selector on the current state, and records it as a dependency (along with the value it returned).

>>> calls = []
>>> def select_a(state):
...     calls.append('select_a')
...     return state['a']
...
>>> def select_b(state):
...     calls.append('select_b')
...     return state['b']
...
>>> dependencies = {}
>>> query = Query({'a': 2, 'b': 3}, dependencies)
>>> query(select_a) + query(select_b) * query(select_a)
8

Querying select_a a second time returned the remembered value:
>>> calls
['select_a', 'select_b']
>>> [(s.__name__, v) for s, v in dependencies.values()]
[('select_a', 2), ('select_b', 3)]
>>> query.reason is None
True
"""


class Query(object):

    def __init__(self, state, dependencies, reason=None):
        # dependencies :: dict, id(selector) => (selector, value); filled in the order of first use
        self._state = state
        self._dependencies = dependencies

        # the dependency of the previous computation that was found to have changed, if any
        self.reason = reason

    def __call__(self, selector):
        if id(selector) in self._dependencies:
            return self._dependencies[id(selector)][1]

        value = selector(self._state)
        self._dependencies[id(selector)] = (selector, value)
        return value

    def __repr__(self):
        return "<Query: %d dependencies>" % len(self._dependencies)
