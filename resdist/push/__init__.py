"""Push estimator: work-set queue and landmark-absorbed push propagation."""

from resdist.push.propagation import PushState, push_from_anchor
from resdist.push.queue import WorkQueue

__all__ = [
    "PushState",
    "WorkQueue",
    "push_from_anchor",
]
