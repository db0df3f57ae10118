"""Default configuration values for cropkit."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# View fitting
# ---------------------------------------------------------------------------

# Fraction of the viewport kept clear on every side when the crop is fitted to
# the view. Handles are clamped into the same band.
CROP_BUFFER: Final[float] = 0.05

# Extra shrink applied on top of the buffer so a freshly fitted crop sits
# strictly inside the margin band.
FIT_SAFETY: Final[float] = 1e-4

# ---------------------------------------------------------------------------
# Crop constraints
# ---------------------------------------------------------------------------

# Smallest crop edge, in viewport pixels, a corner drag may produce.
MIN_CROP: Final[float] = 10.0

# Floor for crop extents derived by the boundary fitter, in image pixels.
MIN_EXTENT: Final[float] = 1e-6

# Points this close outside the image bounds count as inside.
BOUNDS_TOLERANCE: Final[float] = 1e-9

# Upper bound on full corner passes made by the scale fitter.
MAX_FIT_PASSES: Final[int] = 8

# ---------------------------------------------------------------------------
# Interaction
# ---------------------------------------------------------------------------

# Degrees of rotation applied per horizontal viewport pixel while dragging
# the straighten control.
ROTATION_DEGREES_PER_PIXEL: Final[float] = 0.25
