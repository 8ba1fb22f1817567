"""Interfaces and exceptions used by the package"""

from abc import ABC, abstractmethod

__all__ = [
    'NoApplicableMethod', 'SealedGeneric', 'FrozenRecordError',
    'ITagStore', 'IMethodTable', 'IDispatcher',
]


class NoApplicableMethod(Exception):

    """No method or default is registered for any of the value's tags

    'generic' is the generic name that was invoked, and 'tags' is the full
    tuple of tags that was tried, in priority order."""

    def __init__(self, generic, tags=()):
        self.generic = generic
        self.tags = tuple(tags)
        Exception.__init__(self, generic, self.tags)

    def __str__(self):
        return "No applicable method for %r applied to tags %r" % (
            self.generic, self.tags
        )


class SealedGeneric(Exception):
    """Generic is closed to new methods for this tag"""

    def __init__(self, generic, tag):
        self.generic = generic
        self.tag = tag
        Exception.__init__(self, generic, tag)

    def __str__(self):
        return "Generic %r is sealed for tag %r" % (self.generic, self.tag)


class FrozenRecordError(AttributeError):
    """Attempt to modify a value-semantic record in place"""









class ITagStore(ABC):

    """Association between runtime values and ordered tag sequences"""

    @abstractmethod
    def tagsOf(self, value):
        """Return the tuple of tags for 'value', highest priority first"""

    @abstractmethod
    def setTags(self, value, tags):
        """Replace the tags of 'value', returning the object to use

        The returned object is 'value' itself when it can be tagged in
        place, or a wrapper carrying the tags when it cannot."""

    @abstractmethod
    def clearTags(self, value):
        """Forget explicit tags for 'value', returning the bare object"""


class IMethodTable(ABC):

    """Mapping from '(generic,tag)' pairs to callables, plus defaults"""

    @abstractmethod
    def register(self, generic, tag, method):
        """Use 'method' for 'generic' on values tagged 'tag'

        An existing entry for the same pair is silently replaced."""

    @abstractmethod
    def registerDefault(self, generic, method):
        """Use 'method' for 'generic' when no tag matches"""

    @abstractmethod
    def lookup(self, generic, tag):
        """Return the method for '(generic,tag)', or 'None'"""

    @abstractmethod
    def lookupDefault(self, generic):
        """Return the default method for 'generic', or 'None'"""


class IDispatcher(ABC):

    """Chooses and calls the tag-appropriate method for a generic"""

    @abstractmethod
    def applicable(self, generic, value):
        """Return list of '(tag,method)' pairs that apply to 'value'

        Pairs are in tag priority order; the default, if any, comes last
        with a tag of 'None'."""

    @abstractmethod
    def invoke(self, generic, value, *args, **kw):
        """Call the first applicable method with '(value,*args,**kw)'"""
