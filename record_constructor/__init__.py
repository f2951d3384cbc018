"""record_constructor: validate a name and an age and build a ``Record``.

Public API
----------
construct
    Validate a name and an age string and return a ``Record``.
Record
    Immutable, always-valid name/age value object.
RecordError, ErrorKind
    Exception raised by ``construct`` and its tagged failure category.
AGE_MAX
    Oldest accepted age.

Example
-------
>>> from record_constructor import construct
>>> construct("Alice", "30")
Record(name='Alice', age=30)
"""

from record_constructor.errors import ErrorKind, RecordError
from record_constructor.record import AGE_MAX, Record, construct

__all__: list[str] = ["AGE_MAX", "ErrorKind", "Record", "RecordError", "construct"]
