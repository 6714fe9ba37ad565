from reconciler.rewards.common import *
from reconciler.rewards.decoder import *
from reconciler.rewards.reconcile import *
