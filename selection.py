"""
Memoized selectors with automatically tracked dependencies.

A selector is any function from a state to some derived value. A memoized selector is made from "selection logic": a
function that is handed a `query` and uses it to call other selectors. Those calls are recorded, and the set of recorded
dependencies (along with the values they returned) is what decides, next time around, whether the cached value can be
reused. Dependencies are never declared up front; they are whatever the logic actually asked for on its last run.

The state is only ever compared by identity. This means that states must be updated in the style of persistent data
structures: make a new object for whatever changed (and for its parents), keep the same object for everything else.

>>> context = create_selection_context()
>>> select_sum = context.make_selector(lambda query: query(lambda s: s['a']) + query(lambda s: s['b']))
>>>
>>> state = {'a': 1, 'b': 2}
>>> select_sum(state)
3
>>> select_sum.recomputations()
1

The very same state: the cached value is returned without asking anything
>>> select_sum(state)
3
>>> select_sum.recomputations()
1

A new state in which one of the dependencies has a different value
>>> select_sum({'a': 3, 'b': 2})
5
>>> select_sum.recomputations()
2

Selection logic must ask for something by calling `query` at least once:
>>> select_nothing = context.make_selector(lambda query: 42)
>>> select_nothing(state)
Traceback (most recent call last):
selection.SelectorMalfunction: Selector malfunction: the selection logic must select some data by calling `query(selector)` at least once.
"""

from functools import update_wrapper
import logging

from memoization import CachedResult
from query import Query
from utils import selector_name

logger = logging.getLogger(__name__)

_NOTHING_SEEN = object()

_PRIMITIVE_TYPES = (bool, int, float, complex, str, bytes, type(None))


class SelectorMalfunction(Exception):
    pass


class CyclicDependencyError(Exception):
    pass


def select_state(state):
    """The identity selector; the starting point for composing other selectors."""
    return state


def strict_equal(a, b):
    """
    Default equality for the values returned by dependencies: identity, except for primitive values, which are compared
    by value (when of the same type).

    >>> strict_equal(1000, int('1000'))
    True
    >>> strict_equal(1, 1.0)
    False
    >>> strict_equal([1], [1])
    False
    >>> l = [1]
    >>> strict_equal(l, l)
    True
    """
    if a is b:
        return True

    return type(a) is type(b) and isinstance(a, _PRIMITIVE_TYPES) and a == b


class SelectionContext(object):
    """
    Holds the latest state seen by any of the selectors that were made by this context, along with a version number for
    it; all selectors of a single context share that version number.

    The wrapper functions are hooks for tooling (tracing, profiling). Each of them MUST return the result of calling the
    function that it is passed, or everything breaks down (silently). Setting a wrapper replaces the previous one; to
    combine wrappers, chain them yourself.
    """

    def __init__(self, detect_cycles=False):
        self.last_seen_state = _NOTHING_SEEN
        self.state_version = None

        # invocation_wrapper(invoke, selector, state); called for each call of each selector
        self.invocation_wrapper = None

        # computation_wrapper(compute, selector, state, reason); called for each (re)computation
        self.computation_wrapper = None

        self.detect_cycles = detect_cycles
        self._evaluating = set()

    def __repr__(self):
        return "<SelectionContext at version %s>" % self.state_version

    def observe(self, state):
        if self.last_seen_state is not state:
            self.last_seen_state = state
            self.state_version = (self.state_version or 0) + 1

        return self.state_version

    def make_selector(self, selection_logic, result_equals=strict_equal):
        return MemoizedSelector(self, selection_logic, result_equals)

    def set_invocation_wrapper(self, wrapper):
        self.invocation_wrapper = wrapper

    def set_computation_wrapper(self, wrapper):
        self.computation_wrapper = wrapper


class MemoizedSelector(object):

    def __init__(self, context, selection_logic, result_equals=strict_equal):
        # name and doc only; the signature is our own (state), not the logic's (query)
        update_wrapper(self, selection_logic, assigned=('__module__', '__name__', '__qualname__', '__doc__'), updated=())
        del self.__wrapped__

        self.context = context
        self.selection_logic = selection_logic

        # Used by the selectors that depend on this one, to decide whether the value they saw last time has changed.
        self.result_equals = result_equals

        self._recomputations = 0
        self._cached = None

    def __repr__(self):
        return "<MemoizedSelector %s>" % selector_name(self)

    def __call__(self, state):
        wrapper = self.context.invocation_wrapper
        if wrapper is None:
            return self._select(state)

        return wrapper(lambda: self._select(state), self, state)

    def recomputations(self):
        return self._recomputations

    def reset_recomputations(self):
        self._recomputations = 0
        return self._recomputations

    def introspect(self):
        """The CachedResult of the latest computation (None before the first one); never computes anything."""
        return self._cached

    def _select(self, state):
        if not self.context.detect_cycles:
            return self._select_unguarded(state)

        evaluating = self.context._evaluating
        if self in evaluating:
            raise CyclicDependencyError("Cyclic dependency: %s depends on itself" % selector_name(self))

        evaluating.add(self)
        try:
            return self._select_unguarded(state)
        finally:
            evaluating.discard(self)

    def _select_unguarded(self, state):
        state_version = self.context.observe(state)
        cached = self._cached
        reason = None

        if cached is not None:
            if cached.state_version == state_version:
                return cached.value

            for selector, previous_value in cached.dependency_pairs():
                result_equals = getattr(selector, 'result_equals', strict_equal)
                if not result_equals(selector(state), previous_value):
                    reason = selector
                    break
            else:
                return cached.value

        return self._compute(state, state_version, reason)

    def _compute(self, state, state_version, reason):
        self._recomputations += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Computing %s (%s)", selector_name(self),
                         "first run" if reason is None else "invalidated by %s" % selector_name(reason))

        dependencies = {}
        query = Query(state, dependencies, reason)

        wrapper = self.context.computation_wrapper
        if wrapper is None:
            value = self.selection_logic(query)
        else:
            value = wrapper(lambda: self.selection_logic(query), self, state, reason)

        if len(dependencies) == 0:
            raise SelectorMalfunction(
                "Selector malfunction: the selection logic must select some data by calling `query(selector)` at "
                "least once.")

        self._cached = CachedResult(state_version, dependencies, value)
        return value


def create_selection_context(detect_cycles=False):
    """Creates a new context; selectors made by different contexts do not share anything."""
    return SelectionContext(detect_cycles=detect_cycles)


default_context = create_selection_context()

make_selector = default_context.make_selector
