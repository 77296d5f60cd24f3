"""
`create_selector`: for when the dependencies are known up front anyway. The input selectors are queried (in the given
order) and their results are passed to `result_func`.

>>> from selection import create_selection_context
>>> context = create_selection_context()
>>>
>>> def select_items(state):
...     return state['shop']['items']
...
>>> def select_tax_percent(state):
...     return state['shop']['tax_percent']
...
>>> select_subtotal = create_selector(
...     select_items, lambda items: sum(item['value'] for item in items), context=context)
>>> select_tax = create_selector(
...     select_subtotal, select_tax_percent, lambda subtotal, tax_percent: subtotal * tax_percent // 100,
...     context=context)
>>> select_total = create_selector(
...     [select_subtotal, select_tax], lambda subtotal, tax: {'total': subtotal + tax}, context=context)
>>>
>>> state = {'shop': {'tax_percent': 8, 'items': [{'name': 'apple', 'value': 120}, {'name': 'orange', 'value': 95}]}}
>>> select_subtotal(state)
215
>>> select_tax(state)
17
>>> select_total(state)
{'total': 232}
>>> select_subtotal.recomputations(), select_tax.recomputations(), select_total.recomputations()
(1, 1, 1)
"""

from selection import default_context


def create_selector(*funcs, context=None, **kwargs):
    if len(funcs) < 2:
        raise TypeError("create_selector takes one or more input selectors and a result function")

    result_func = funcs[-1]
    input_selectors = funcs[0] if isinstance(funcs[0], (list, tuple)) else funcs[:-1]

    if context is None:
        context = default_context

    def selection_logic(query):
        return result_func(*[query(selector) for selector in input_selectors])

    selection_logic.__name__ = getattr(result_func, '__name__', selection_logic.__name__)
    return context.make_selector(selection_logic, **kwargs)
