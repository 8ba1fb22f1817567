"""Dispatcher, registries and generic function objects"""

import logging

from tagdispatch.interfaces import IDispatcher, NoApplicableMethod
from tagdispatch.combiners import method_chain
from tagdispatch.table import MethodTable
from tagdispatch.tags import TagStore

__all__ = ['Dispatcher', 'Registry', 'GenericFunction']

log = logging.getLogger(__name__)


class Dispatcher(IDispatcher):

    """Single-dispatch, first-match-wins resolution over a value's tags

    The value's tags are tried in order against 'table'; the first tag
    with a method wins, even when a later tag also has one.  If no tag
    matches, the generic's default is used, and if there is no default
    either, 'NoApplicableMethod' is raised.  How the applicable methods
    are turned into the callable actually invoked is up to
    'method_combiner' (see 'tagdispatch.combiners').
    """

    def __init__(self, table, store, method_combiner=None):
        self.table = table
        self.store = store
        if method_combiner is None:
            method_combiner = method_chain
        self.method_combiner = method_combiner


    def applicable(self, generic, value):
        return self.table.casesFor(generic, self.store.tagsOf(value))


    def resolve(self, generic, value):
        """Return the '(tag,method)' pair that 'invoke()' would start with"""
        tags = self.store.tagsOf(value)
        cases = self.table.casesFor(generic, tags)
        if not cases:
            raise NoApplicableMethod(generic, tags)
        return cases[0]


    def invoke(self, generic, value, *args, **kw):

        tags = self.store.tagsOf(value)
        cases = self.table.casesFor(generic, tags)

        if not cases:
            log.debug("No method for %r on tags %r", generic, tags)
            raise NoApplicableMethod(generic, tags)

        log.debug("Dispatching %r on tags %r to tag %r",
            generic, tags, cases[0][0])

        def exhausted(*args, **kw):
            raise NoApplicableMethod(generic, tags)

        method = self.method_combiner(
            [method for tag, method in cases], exhausted
        )
        return method(value, *args, **kw)









class Registry(object):

    """An independent set of generics, methods and value tags

    Nothing is global: two registries never see each other's methods,
    except that a registry made with 'clone()' falls back to its parent's.
    An existing 'table' or 'store' may be supplied; 'implicit' only applies
    to a store created here.
    """

    def __init__(self, implicit=False, method_combiner=None,
        table=None, store=None
    ):
        if table is None:
            table = MethodTable()
        if store is None:
            store = TagStore(implicit=implicit)
        self.table = table
        self.store = store
        self.dispatcher = Dispatcher(table, store, method_combiner)


    def register(self, generic, tag, method):
        self.table.register(generic, tag, method)

    def registerDefault(self, generic, method):
        self.table.registerDefault(generic, method)

    def unregister(self, generic, tag):
        self.table.unregister(generic, tag)

    def unregisterDefault(self, generic):
        self.table.unregisterDefault(generic)

    def methodsFor(self, generic):
        return self.table.methodsFor(generic)

    def generics(self):
        return self.table.generics()

    def lookup(self, generic, tag):
        return self.table.lookup(generic, tag)

    def lookupDefault(self, generic):
        return self.table.lookupDefault(generic)

    def seal(self, generic, tags):
        self.table.seal(generic, tags)


    def setTags(self, value, tags):
        return self.store.setTags(value, tags)

    def tagsOf(self, value):
        return self.store.tagsOf(value)

    def clearTags(self, value):
        return self.store.clearTags(value)

    def inherits(self, value, *tags):
        return self.store.inherits(value, *tags)


    def invoke(self, generic, value, *args, **kw):
        return self.dispatcher.invoke(generic, value, *args, **kw)

    def applicable(self, generic, value):
        return self.dispatcher.applicable(generic, value)

    def resolve(self, generic, value):
        return self.dispatcher.resolve(generic, value)


    def clone(self):
        """Return a child registry that inherits this one's methods

        The child shares this registry's tag store and method combiner,
        but its registrations are its own."""
        return self.__class__(
            method_combiner=self.dispatcher.method_combiner,
            table=self.table.clone(), store=self.store
        )


    def generic(self, name):
        """Return a 'GenericFunction' for 'name' in this registry

        'name' may also be a function, in which case its name and docstring
        are used and its body is ignored; this allows use as a decorator::

            @registry.generic
            def area(shape):
                '''Area of a shape'''
        """
        if isinstance(name, str):
            return GenericFunction(name, self)
        return GenericFunction(name.__name__, self, name.__doc__)









class GenericFunction(object):

    """Callable front end for one generic name in a registry"""

    def __init__(self, name, registry, doc=None):
        self.__name__ = self.name = name
        self.__doc__ = doc
        self.registry = registry

    def __call__(self, value, *args, **kw):
        return self.registry.invoke(self.name, value, *args, **kw)


    def addMethod(self, tags, function):
        """Use 'function' for values carrying any of 'tags'"""
        if isinstance(tags, str):
            tags = tags,
        if not tags:
            raise TypeError("addMethod() requires at least one tag")
        for tag in tags:
            self.registry.register(self.name, tag, function)


    def when(self, *tags):
        """Decorator: add following function to this GF for 'tags'"""
        if not tags:
            raise TypeError("when() requires at least one tag")
        def decorate(function):
            self.addMethod(tags, function)
            return function
        return decorate


    def default(self, function):
        """Decorator: use following function when no tag matches"""
        self.registry.registerDefault(self.name, function)
        return function


    def applicable(self, value):
        return self.registry.applicable(self.name, value)

    def resolve(self, value):
        return self.registry.resolve(self.name, value)

    def __repr__(self):
        return "<GenericFunction %r>" % self.name
