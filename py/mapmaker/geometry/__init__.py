from .projection import (Interval, InvalidIntervalError, Projection,
                         identity_projection, unit_projection,
                         symmetric_unit_projection, apply_projection,
                         UNIT_INTERVAL, SYMMETRIC_UNIT_INTERVAL)
