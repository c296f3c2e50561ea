"""
Dialect-aware SQL expressions.

Dependencies: sqlalchemy
System role: Portable SQL building blocks for aggregate queries
"""

from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement
from sqlalchemy.types import Float


class epoch_seconds(FunctionElement):
    """Seconds since the Unix epoch for a timestamp expression."""

    type = Float()
    name = "epoch_seconds"
    inherit_cache = True


@compiles(epoch_seconds)
def _epoch_seconds_default(element, compiler, **kw):
    return "EXTRACT(EPOCH FROM %s)" % compiler.process(element.clauses, **kw)


@compiles(epoch_seconds, "sqlite")
def _epoch_seconds_sqlite(element, compiler, **kw):
    return "(julianday(%s) * 86400.0)" % compiler.process(element.clauses, **kw)
