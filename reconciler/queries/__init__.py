from reconciler.queries.common import *
from reconciler.queries.events import *
