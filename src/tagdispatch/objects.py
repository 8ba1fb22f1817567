"""Records: declared fields, fresh defaults and explicit aliasing policies

    Field -- declares an instance field and how its initial value is made

    Record -- mutable object with reference semantics: assignment aliases,
        and 'copy()' is needed to get a (shallow) duplicate

    ValueRecord -- frozen object with value semantics: assignment
        duplicates, "modification" produces a new record via 'replace()'

    assign -- explicit assignment honouring a record's aliasing policy

Every field value is constructed fresh for each instance.  A mutable
default such as '[]' is deep-copied per instance, so sibling instances
never share it by accident; pass 'shared=True' to a 'Field' to really
share one object among all instances.

Record classes carry '__tags__' derived from their class hierarchy (most
derived first), so their instances dispatch through a 'TagStore' without
explicit tagging::

    class Animal(Record):
        name = Field()

    class Dog(Animal):
        tricks = Field(factory=list)

    Dog.__tags__   # -> ('Dog', 'Animal')
"""

import copy

from tagdispatch.interfaces import FrozenRecordError

__all__ = [
    'Field', 'Record', 'ValueRecord', 'assign', 'REFERENCE', 'VALUE',
    'NOTHING',
]

REFERENCE = 'reference'
VALUE = 'value'


class _Nothing(object):
    __slots__ = ()
    def __repr__(self): return "NOTHING"

NOTHING = _Nothing()


class Field(object):

    """An instance field with a per-instance initial value"""

    name = None

    def __init__(self, default=NOTHING, factory=None, shared=False, doc=None):
        if factory is not None and default is not NOTHING:
            raise TypeError("Field can't have both a default and a factory")
        self.default = default
        self.factory = factory
        self.shared = shared
        self.__doc__ = doc

    def required(self):
        return self.factory is None and self.default is NOTHING

    def initial(self):
        """Return a new initial value for one instance"""
        if self.factory is not None:
            return self.factory()
        if self.shared:
            return self.default
        return copy.deepcopy(self.default)

    def __repr__(self):
        return "Field(%s)" % (self.name,)










class Record(object):

    """Mutable record with reference semantics"""

    aliasing = REFERENCE
    __fields__ = ()
    _base_record = True

    def __init_subclass__(cls, **kw):
        super().__init_subclass__(**kw)

        fields = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Field):
                    value.name = name
                    fields[name] = value
        cls.__fields__ = tuple(fields.values())

        if '_base_record' not in vars(cls):
            cls._base_record = False
        if '__tags__' not in vars(cls):
            cls.__tags__ = tuple([
                klass.__name__ for klass in cls.__mro__
                    if issubclass(klass, Record) and not klass._base_record
            ])


    def __init__(self, **kw):
        for field in self.__fields__:
            if field.name in kw:
                value = kw.pop(field.name)
            elif field.required():
                raise TypeError(
                    "%s() missing required field: %r"
                    % (self.__class__.__name__, field.name)
                )
            else:
                value = field.initial()
            object.__setattr__(self, field.name, value)

        for k in kw:
            raise TypeError(
                "%s() got an unexpected field: %r"
                % (self.__class__.__name__, k)
            )


    def fieldValues(self):
        """Return list of '(name,value)' pairs in declaration order"""
        return [(f.name, getattr(self, f.name)) for f in self.__fields__]


    def copy(self):
        """Return a shallow clone: a new record holding the same values"""
        return self.__class__(**dict(self.fieldValues()))

    __copy__ = copy


    def __repr__(self):
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join(["%s=%r" % item for item in self.fieldValues()])
        )


class ValueRecord(Record):

    """Frozen record with value semantics"""

    aliasing = VALUE
    _base_record = True

    def __setattr__(self, name, value):
        raise FrozenRecordError(
            "can't set %r on %s; use replace()"
            % (name, self.__class__.__name__)
        )

    def __delattr__(self, name):
        raise FrozenRecordError(
            "can't delete %r from %s" % (name, self.__class__.__name__)
        )

    def replace(self, **changes):
        """Return a new record with 'changes' applied"""
        values = dict(self.fieldValues())
        values.update(changes)
        return self.__class__(**values)

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.fieldValues() == other.fieldValues()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.__class__, tuple(self.fieldValues())))










def assign(ob, policy=None):
    """Return what a variable assigned from 'ob' should hold

    With the 'REFERENCE' policy that is 'ob' itself, so both names see the
    same object.  With 'VALUE' it is a copy.  'policy' defaults to the
    object's own 'aliasing' attribute, or 'REFERENCE' if it has none.
    """
    if policy is None:
        policy = getattr(ob, 'aliasing', REFERENCE)
    if policy == REFERENCE:
        return ob
    if policy == VALUE:
        return copy.copy(ob)
    raise ValueError("Unknown aliasing policy: %r" % (policy,))
