"""Tag-based Single Dispatch Generic Functions

 A generic function looks at the runtime tags of its first argument and
 chooses the method registered for the first tag that has one, falling
 back to the generic's default, and failing with 'NoApplicableMethod' when
 there is neither.  Tags are ordered strings attached to values by a
 'TagStore'; methods live in a 'MethodTable'; a 'Registry' bundles the two
 with a 'Dispatcher', so independent registries can coexist::

    from tagdispatch import Registry

    registry = Registry()
    center = registry.generic('center')

    @center.when('skewed')
    def trimmed(x, trim=0.1):
        ...

    @center.default
    def median(x):
        ...

    x = registry.setTags([1, 2, 3, 50], 'skewed')
    center(x)

 Methods whose first parameter is named 'next_method' receive a callable
 that continues with the next applicable method (later tags, then the
 default).

 Registration should normally be finished before dispatching begins; the
 tables are locked internally, so late registration is safe, but a call
 already being dispatched will not see it.
"""

import tagdispatch.logconfig

from tagdispatch.interfaces import *
from tagdispatch.tags import TagStore, Tagged, unwrap
from tagdispatch.table import MethodTable
from tagdispatch.combiners import method_chain, method_list
from tagdispatch.functions import Dispatcher, Registry, GenericFunction
from tagdispatch.objects import Field, Record, ValueRecord, assign
from tagdispatch.objects import REFERENCE, VALUE
