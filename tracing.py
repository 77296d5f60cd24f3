"""
Tools to see what selectors are doing; built on the context's wrapper hooks.

Selectors are easier to follow when they have names; `make_named_selector` gives them one.

>>> from selection import create_selection_context
>>> context = create_selection_context()
>>> tracer = Tracer(context)
>>>
>>> select_a = make_named_selector(context, 'select_a', lambda query: query(lambda state: state['a']))
>>> select_double_a = make_named_selector(context, 'select_double_a', lambda query: query(select_a) * 2)
>>>
>>> tracer.mark('first state')
>>> select_double_a({'a': 1})
2
>>> tracer.mark('a changed')
>>> select_double_a({'a': 2})
4
>>> print("\\n".join(tracer.log))
first state
| INVOKE select_double_a
| | COMPUTE select_double_a [first run]
| | | INVOKE select_a
| | | | COMPUTE select_a [first run]
a changed
| INVOKE select_double_a
| | INVOKE select_a
| | | COMPUTE select_a [invalidated by [unnamed selector]]
| | COMPUTE select_double_a [invalidated by select_a]
| | | INVOKE select_a

>>> tracer.uninstall()
>>> context.invocation_wrapper is None and context.computation_wrapper is None
True
"""

import logging

from utils import selector_name

logger = logging.getLogger(__name__)


def make_named_selector(context, name, selection_logic, **kwargs):
    selector = context.make_selector(selection_logic, **kwargs)
    selector.display_name = name
    return selector


class Tracer(object):
    """Records the tree of selector invocations and computations as indented lines of text.

    Installing a Tracer replaces whatever wrappers were set on the context before.
    """

    def __init__(self, context):
        self.context = context
        self.log = []
        self.depth = 0

        context.set_invocation_wrapper(self.wrap_invocation)
        context.set_computation_wrapper(self.wrap_computation)

    def uninstall(self):
        self.context.set_invocation_wrapper(None)
        self.context.set_computation_wrapper(None)

    def mark(self, text):
        self._append(text)

    def wrap_invocation(self, invoke, selector, state):
        return self._run_with_log("INVOKE " + selector_name(selector), invoke)

    def wrap_computation(self, compute, selector, state, reason):
        if reason is None:
            suffix = " [first run]"
        else:
            suffix = " [invalidated by %s]" % selector_name(reason)

        return self._run_with_log("COMPUTE " + selector_name(selector) + suffix, compute)

    def _run_with_log(self, text, f):
        self.depth += 1
        try:
            self._append("| " * self.depth + text)
            return f()
        finally:
            self.depth -= 1

    def _append(self, line):
        logger.debug(line)
        self.log.append(line)
