"""
Types here are instantiated as subclasses of pydantic's `BaseModel`.
This means we get runtime deserialization and validation for free just by using type declarations
and a couple of pydantic helpers.

Felts (addresses, selectors, amounts) are held as python ints so arithmetic never wraps,
and only rendered back to hex at the edges (RPC requests, CSV output).
"""

from reconciler.models.Config import *
from reconciler.models.Event import *
from reconciler.models.Fact import *
from reconciler.models.Reconciliation import *
from reconciler.models.felt import *
from reconciler.models.Writer import *
