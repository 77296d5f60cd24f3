"""
"There are only two hard things in Computer Science: cache invalidation and naming things." Here are some notes about
one of those (caching).

A memoized selector caches a single value: the result of its last computation. The question of "cache invalidation"
is then the question of whether that single value is still valid for the state that we're currently asked about.

We answer that question in two steps, from cheap to less cheap:

* The context that a selector belongs to hands out a version number for each state it sees (a new number whenever the
  state is a different object than the previous one). A cached value that was computed at the current version is valid
  without further questions. Since the state is never looked into, this costs O(1).

* Otherwise, we ask the dependencies. While computing, a selector records each dependency it queried together with the
  value that dependency returned. If all of those dependencies still return the same values (in the sense of that
  dependency's result equality), the cached value is still valid, even though the state as a whole is not the same.

The second step is only cheap if the dependencies are themselves memoized, and if the state is updated in the style of
persistent data structures (parts that did not change keep their identity). Neither is checked for; both are the
caller's side of the deal.

A CachedResult is replaced wholesale on each recomputation; the dependencies of an existing CachedResult are never
changed after the fact.

>>> from selection import create_selection_context
>>> context = create_selection_context()
>>>
>>> def select_a(state):
...     return state['a']
...
>>> def select_b(state):
...     return state['b']
...
>>> @context.make_selector
... def select_a_plus_b(query):
...     return query(select_a) + query(select_b)
...
>>> select_a_plus_b.introspect() is None
True
>>> select_a_plus_b({'a': 2, 'b': 3})
5
>>> select_a_plus_b.introspect()
CachedResult(state_version=1, dependencies={select_a: 2, select_b: 3}, value=5)
"""

from utils import pmts, selector_name


class CachedResult(object):
    """The result of a single computation of a memoized selector"""

    def __init__(self, state_version, dependencies, value):
        pmts(state_version, int)
        pmts(dependencies, dict)

        self.state_version = state_version
        self.dependencies = dependencies  # id(selector) => (selector, the value it returned during the computation)
        self.value = value

    def dependency_pairs(self):
        """(selector, value) for each dependency, in the order in which they were first queried"""
        return list(self.dependencies.values())

    def __repr__(self):
        return "CachedResult(state_version=%s, dependencies={%s}, value=%r)" % (
            self.state_version,
            ", ".join("%s: %r" % (selector_name(s), v) for s, v in self.dependency_pairs()),
            self.value,
        )
