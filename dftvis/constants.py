__all__ = ["c", "two_pi"]

import math

# Lightspeed
c = 2.99792458e8

two_pi = 2.0 * math.pi
