"""Method Table: '(generic,tag)' -> callable, with per-generic defaults"""

import logging
from threading import RLock

from tagdispatch.interfaces import IMethodTable, SealedGeneric

__all__ = ['MethodTable']

log = logging.getLogger(__name__)


class MethodTable(IMethodTable):

    """Extensible method registry

    A table may have a 'parent' table (see 'clone()').  Lookups that find
    nothing locally fall through to the parent; registrations only ever
    affect the table they are made on.  A table also honours every seal
    declared on its ancestors.
    """

    def __init__(self, parent=None):
        self.parent = parent
        self.__lock = RLock()
        self.clear()


    def clear(self):
        """Forget all local methods, defaults and seals"""
        self.__lock.acquire()
        try:
            self._methods = {}
            self._defaults = {}
            self._sealed = {}
        finally:
            self.__lock.release()


    def register(self, generic, tag, method):
        self.__lock.acquire()
        try:
            if self.isSealed(generic, tag):
                raise SealedGeneric(generic, tag)
            key = generic, tag
            if key in self._methods:
                log.debug("Replacing method for %r on tag %r", generic, tag)
            else:
                log.debug("Registering method for %r on tag %r", generic, tag)
            self._methods[key] = method
        finally:
            self.__lock.release()


    def registerDefault(self, generic, method):
        self.__lock.acquire()
        try:
            if generic in self._defaults:
                log.debug("Replacing default for %r", generic)
            else:
                log.debug("Registering default for %r", generic)
            self._defaults[generic] = method
        finally:
            self.__lock.release()


    def unregister(self, generic, tag):
        """Remove the local method for '(generic,tag)', if there is one"""
        self.__lock.acquire()
        try:
            if self._methods.pop((generic, tag), None) is not None:
                log.debug("Removed method for %r on tag %r", generic, tag)
        finally:
            self.__lock.release()


    def unregisterDefault(self, generic):
        """Remove the local default for 'generic', if there is one"""
        self.__lock.acquire()
        try:
            if self._defaults.pop(generic, None) is not None:
                log.debug("Removed default for %r", generic)
        finally:
            self.__lock.release()









    def lookup(self, generic, tag):
        method = self._methods.get((generic, tag))
        if method is None and self.parent is not None:
            return self.parent.lookup(generic, tag)
        return method

    def lookupDefault(self, generic):
        method = self._defaults.get(generic)
        if method is None and self.parent is not None:
            return self.parent.lookupDefault(generic)
        return method


    def casesFor(self, generic, tags):
        """Return '(tag,method)' pairs for 'tags', default last as 'None'

        Tags with no method are skipped, as are repeats of a tag already
        seen.  The whole lookup is made while holding the table's lock, so
        it reflects a single consistent state of this table.
        """
        found = []
        seen = set()
        self.__lock.acquire()
        try:
            for tag in tags:
                if tag in seen:
                    continue
                seen.add(tag)
                method = self.lookup(generic, tag)
                if method is not None:
                    found.append((tag, method))
            method = self.lookupDefault(generic)
            if method is not None:
                found.append((None, method))
        finally:
            self.__lock.release()
        return found


    def methodsFor(self, generic):
        """Return a dictionary of 'tag -> method' for 'generic'"""
        if self.parent is not None:
            found = self.parent.methodsFor(generic)
        else:
            found = {}
        self.__lock.acquire()
        try:
            for (name, tag), method in self._methods.items():
                if name == generic:
                    found[tag] = method
        finally:
            self.__lock.release()
        return found


    def generics(self):
        """Return sorted list of generic names with methods or defaults"""
        if self.parent is not None:
            names = set(self.parent.generics())
        else:
            names = set()
        self.__lock.acquire()
        try:
            names.update([generic for generic, tag in self._methods])
            names.update(self._defaults)
        finally:
            self.__lock.release()
        return sorted(names)


    def seal(self, generic, tags):
        """Close 'generic' to further registrations for each of 'tags'

        This models built-in generics whose behaviour for base kinds of
        value is fixed: methods for other tags can still be added.  Seals
        are cumulative and permanent.
        """
        if isinstance(tags, str):
            tags = tags,
        self.__lock.acquire()
        try:
            closed = self._sealed.setdefault(generic, set())
            closed.update(tags)
            log.debug("Sealed %r for tags %r", generic, sorted(closed))
        finally:
            self.__lock.release()


    def isSealed(self, generic, tag):
        if tag in self._sealed.get(generic, ()):
            return True
        if self.parent is not None:
            return self.parent.isSealed(generic, tag)
        return False


    def clone(self):
        """Return a table that inherits this one's methods and seals"""
        return self.__class__(parent=self)


    def __contains__(self, key):
        generic, tag = key
        return self.lookup(generic, tag) is not None
