"""Tag Store: ordered runtime tags for arbitrary values

    TagStore -- records tag sequences for values, by object identity

    Tagged -- stand-in for values that can't be weakly referenced (numbers,
        strings, lists, dicts, ...); it behaves like the value it wraps

    unwrap -- return the object inside a 'Tagged' wrapper, if any

Tags are looked up in this order: tags set explicitly through the store
(wrappers included), a 'Tagged' wrapper's own construction-time tags, the
value's '__tags__' attribute, and finally (only for stores created with
'implicit=True') the names of the value's classes in MRO order.
"""

import logging
import operator
from threading import RLock
from weakref import ref

from tagdispatch.interfaces import ITagStore

__all__ = ['TagStore', 'Tagged', 'unwrap', 'normalizeTags']

log = logging.getLogger(__name__)


def normalizeTags(tags):
    """Return 'tags' as a tuple; a lone string is a one-tag sequence"""
    if tags is None:
        return ()
    if isinstance(tags, str):
        return (tags,)
    return tuple(tags)


class Tagged(object):

    """A value standing in for the object it wraps

    Attribute access, indexing, membership, comparison, arithmetic and the
    usual conversions are forwarded to 'value', so methods can treat a
    wrapper as the value itself.  'tags' holds the tags the wrapper was
    constructed with; a 'TagStore' keeps its own tags for a wrapper and
    never changes these.
    """

    __slots__ = 'value', 'tags', '__weakref__'

    def __init__(self, value, tags=()):
        self.value = value
        self.tags = normalizeTags(tags)

    def __getattr__(self, name):
        if name in Tagged.__slots__:
            raise AttributeError(name)    # slot not initialized yet
        return getattr(self.value, name)

    def __iter__(self):                 return iter(self.value)
    def __len__(self):                  return len(self.value)
    def __contains__(self, item):       return unwrap(item) in self.value
    def __getitem__(self, key):         return self.value[unwrap(key)]
    def __setitem__(self, key, item):   self.value[unwrap(key)] = item
    def __delitem__(self, key):         del self.value[unwrap(key)]

    def __eq__(self, other):            return self.value == unwrap(other)
    def __ne__(self, other):            return self.value != unwrap(other)
    def __hash__(self):                 return hash(self.value)

    def __bool__(self):                 return bool(self.value)
    def __int__(self):                  return int(self.value)
    def __float__(self):                return float(self.value)
    def __index__(self):                return operator.index(self.value)
    def __str__(self):                  return str(self.value)
    def __format__(self, format_spec):  return format(self.value, format_spec)

    def __repr__(self):
        return "Tagged(%r, %r)" % (self.value, self.tags)


def _forward(op):
    def method(self, *args):
        return op(self.value, *map(unwrap, args))
    return method

def _reflect(op):
    def method(self, other):
        return op(unwrap(other), self.value)
    return method

for _name in ('lt', 'le', 'gt', 'ge', 'neg', 'pos', 'abs', 'invert'):
    setattr(Tagged, '__%s__' % _name, _forward(getattr(operator, _name)))

for _name in (
    'add', 'sub', 'mul', 'matmul', 'truediv', 'floordiv', 'mod', 'pow',
    'lshift', 'rshift', 'and', 'or', 'xor',
):
    _op = getattr(operator, _name, None) or getattr(operator, _name + '_')
    setattr(Tagged, '__%s__' % _name, _forward(_op))
    setattr(Tagged, '__r%s__' % _name, _reflect(_op))

del _name, _op


def unwrap(value):
    """Return the object wrapped by 'value', or 'value' itself"""
    if isinstance(value, Tagged):
        return value.value
    return value


def implicitTags(value):
    return tuple([klass.__name__ for klass in type(value).__mro__])











class TagStore(ITagStore):

    """Identity-keyed tag registry

    Entries are held by weak reference, so tagging an object does not keep
    it alive, and the entry disappears when the object does.  Objects are
    keyed by identity, so two equal objects may carry different tags.
    Each store keeps its own entries, wrappers included, so retagging a
    value through one store never changes what another store reports.
    """

    def __init__(self, implicit=False):
        self.implicit = implicit
        self.__entries = {}
        self.__lock = RLock()


    def tagsOf(self, value):

        self.__lock.acquire()
        try:
            entry = self.__entries.get(id(value))
        finally:
            self.__lock.release()

        if entry is not None and entry[0]() is value:
            return entry[1]

        if isinstance(value, Tagged):
            return value.tags

        # a class's own '__tags__' describes its instances, not itself
        hook = None
        if not isinstance(value, type):
            hook = getattr(value, '__tags__', None)
        if hook is not None:
            return normalizeTags(hook)

        if self.implicit:
            return implicitTags(value)

        return ()


    def setTags(self, value, tags):

        tags = normalizeTags(tags)

        try:
            self._record(value, tags)
        except TypeError:
            log.debug("Wrapping %s value to carry tags %r",
                type(value).__name__, tags)
            value = Tagged(value)
            self._record(value, tags)

        return value


    def _record(self, value, tags):
        """Remember 'tags' for 'value'; 'TypeError' if not weakly referable"""

        key = id(value)

        def forget(wr, key=key, entries=self.__entries, lock=self.__lock):
            lock.acquire()
            try:
                entry = entries.get(key)
                if entry is not None and entry[0] is wr:
                    del entries[key]
            finally:
                lock.release()

        pointer = ref(value, forget)

        self.__lock.acquire()
        try:
            self.__entries[key] = pointer, tags
        finally:
            self.__lock.release()


    def clearTags(self, value):

        self.__lock.acquire()
        try:
            entry = self.__entries.get(id(value))
            if entry is not None and entry[0]() is value:
                del self.__entries[id(value)]
        finally:
            self.__lock.release()

        return unwrap(value)


    def inherits(self, value, *tags):
        """True if any of 'tags' is among the tags of 'value'"""
        have = self.tagsOf(value)
        for tag in tags:
            if tag in have:
                return True
        return False


    def __len__(self):
        self.__lock.acquire()
        try:
            return len(self.__entries)
        finally:
            self.__lock.release()
