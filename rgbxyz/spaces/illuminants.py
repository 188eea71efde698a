"""
Standard illuminant reference whites (CIE 1931 2 degree observer, Y = 1).
"""

from __future__ import annotations

from typing import Dict

from rgbxyz.core.colors import ReferenceWhite

A = ReferenceWhite(1.09850, 1.0, 0.35585, name="A")        # Incandescent / tungsten
B = ReferenceWhite(0.99072, 1.0, 0.85223, name="B")        # Direct sunlight at noon (obsolete)
C = ReferenceWhite(0.98074, 1.0, 1.18232, name="C")        # Average daylight (obsolete)
D50 = ReferenceWhite(0.96422, 1.0, 0.82521, name="D50")    # Horizon light, ICC PCS
D55 = ReferenceWhite(0.95682, 1.0, 0.92149, name="D55")    # Mid-morning daylight
D65 = ReferenceWhite(0.95047, 1.0, 1.08883, name="D65")    # Noon daylight
D75 = ReferenceWhite(0.94972, 1.0, 1.22638, name="D75")    # North sky daylight
E = ReferenceWhite(1.0, 1.0, 1.0, name="E")                # Equal energy
F2 = ReferenceWhite(0.99186, 1.0, 0.67393, name="F2")      # Cool white fluorescent
F7 = ReferenceWhite(0.95041, 1.0, 1.08747, name="F7")      # D65 simulator
F11 = ReferenceWhite(1.00962, 1.0, 0.64350, name="F11")    # Philips TL84

ILLUMINANTS: Dict[str, ReferenceWhite] = {
    white.name: white for white in (A, B, C, D50, D55, D65, D75, E, F2, F7, F11)
}
