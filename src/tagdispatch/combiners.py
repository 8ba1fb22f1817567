"""Method combiners

A method combiner turns the ordered list of applicable methods for a call
into the single callable that the dispatcher invokes.  It is called as
'combiner(methods, exhausted)', where 'methods' is a non-empty list of
callables in priority order (tag methods first, then the default) and
'exhausted' is a callable that raises 'NoApplicableMethod' for the call.

    method_chain -- the first method wins; a method whose first parameter
        is named 'next_method' gets a callable for the rest of the chain

    method_list -- every applicable method is called, and the list of
        results returned; methods are called without a 'next_method'
"""

import inspect
from functools import partial

__all__ = ['method_chain', 'method_list', 'wantsNextMethod']


def wantsNextMethod(method):
    """True if 'method' takes the next method as its first argument"""
    try:
        params = list(inspect.signature(method).parameters)
    except (TypeError, ValueError):
        return False    # not introspectable, therefore not chainable
    return bool(params) and params[0] == 'next_method'


def method_chain(methods, exhausted):
    """Chain 'methods' such that each may call the next"""

    methods = iter(methods) # ensure that nested calls will see only the tail

    for method in methods:
        if wantsNextMethod(method):
            return partial(method, method_chain(methods, exhausted))
        return method

    return exhausted


def method_list(methods, exhausted):
    """Return callable that yields results of calling 'methods' w/same args"""

    methods = list(methods)     # ensure it's re-iterable

    def combined(*args, **kw):
        return [method(*args, **kw) for method in methods]

    return combined
