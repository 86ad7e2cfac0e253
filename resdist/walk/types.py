"""Visit counter container for absorbing random walks."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VisitCounts:
    """Visits to s and t accumulated over all walks, before absorption.

    The first letter names the anchor the walks started from, the second
    the node whose visits were counted.
    """

    tau_ss: int
    tau_st: int
    tau_ts: int
    tau_tt: int
