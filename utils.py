"""
>>> def select_a(state):
...     return state['a']
...
>>> selector_name(select_a)
'select_a'
>>> selector_name(lambda state: state['a'])
'[unnamed selector]'
>>> select_a.display_name = '  select the\\n  value of a '
>>> selector_name(select_a)
'select the value of a'
"""

import re

UNNAMED = '[unnamed selector]'


def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__,
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )


def selector_name(selector):
    # display_name (set by make_named_selector) wins over the function's own name
    name = getattr(selector, 'display_name', None) or getattr(selector, '__name__', None) or ''
    name = re.sub(r'\s+', ' ', str(name)).strip()

    if name in ('', '<lambda>'):
        return UNNAMED

    return name
