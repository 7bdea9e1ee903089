"""
Session load calculation.

Both loads are session-level workload proxies:

    training_load = rpe × duration          (session-RPE, Foster)
    volume_load   = sets × reps × weight    (gym sessions only)

The functions are pure and total.  Inputs are assumed to be already
validated by the session service.
"""


def compute_training_load(rpe: float, duration: float) -> float:
    """Session-RPE training load."""
    return rpe * duration


def compute_volume_load(sets: float, reps: float, weight: float) -> float:
    """Strength volume load (tonnage)."""
    return sets * reps * weight
