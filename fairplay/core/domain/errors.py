from __future__ import annotations


class InvalidObservationError(ValueError):
    pass
