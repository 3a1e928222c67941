"""Force-field normalization for bin force vectors.

Electrostatic forces span many orders of magnitude across a placement, so
drawing them at raw scale makes most vectors invisible. Each vector is
instead scaled relative to the strongest force in the field and bounded by
the smallest bin half-extent, keeping every segment inside its own bin.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForceSegment:
    """A drawable force vector anchored at its bin center."""
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


class ForceFieldNormalizer:
    """Map per-bin forces onto a common, bounded visual scale.

    Bins only need to expose electro_force_x/electro_force_y, the extents
    dx/dy and the center cx/cy.
    """

    def field_extrema(self, bins: Sequence) -> tuple:
        """
        Compute the scaling references for a set of bins.

        Returns:
            (max_magnitude, max_len) where max_len is the smallest bin
            half-extent. Both are 0.0 for an empty sequence. Non-finite
            forces and extents are left out.
        """
        max_magnitude = 0.0
        max_len = math.inf
        for b in bins:
            magnitude = math.hypot(b.electro_force_x, b.electro_force_y)
            if math.isfinite(magnitude):
                max_magnitude = max(max_magnitude, magnitude)
            if math.isfinite(b.dx) and math.isfinite(b.dy):
                max_len = min(max_len, b.dx / 2, b.dy / 2)

        if max_len == math.inf:
            max_len = 0.0
        return max_magnitude, max(max_len, 0.0)

    def normalize(self, bins: Iterable) -> List[ForceSegment]:
        """Produce one segment per bin, in input order.

        The bin with the strongest force gets a segment of exactly max_len;
        the others scale linearly with their magnitude. A field with no
        force at all yields zero-length segments, as does any bin whose force
        is not finite.
        """
        bins = list(bins)
        max_magnitude, max_len = self.field_extrema(bins)

        segments = []
        for b in bins:
            fx = b.electro_force_x
            fy = b.electro_force_y
            cx, cy = b.cx, b.cy

            magnitude = math.hypot(fx, fy)
            if max_magnitude <= 0.0 or max_len <= 0.0 or not math.isfinite(magnitude):
                segments.append(ForceSegment(cx, cy, cx, cy))
                continue

            angle = math.atan2(fy, fx)
            ratio = magnitude / max_magnitude
            dx = math.cos(angle) * max_len * ratio
            dy = math.sin(angle) * max_len * ratio
            segments.append(ForceSegment(cx, cy, cx + dx, cy + dy))

        logger.debug(
            f"Normalized {len(segments)} force vectors "
            f"(max_magnitude={max_magnitude:.3g}, max_len={max_len:.3g})"
        )
        return segments
