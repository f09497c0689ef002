"""Ordered collection of live dots."""

from internal.logging import get_logger

DEFAULT_MAX_BOUNCES = 4


class DotStore:
    """Owns every live dot. Update and expiry are separate passes over the same list."""

    def __init__(self, rng, max_bounces=DEFAULT_MAX_BOUNCES):
        self._dots = []
        self._rng = rng
        self.max_bounces = max_bounces
        self.inserted = 0
        self.expired = 0
        self._log = get_logger()

    def __len__(self):
        return len(self._dots)

    def __iter__(self):
        return iter(tuple(self._dots))

    def insert(self, dot):
        self._dots.append(dot)
        self.inserted += 1

    def update_all(self, bounds):
        for dot in self._dots:
            dot.update(bounds, self._rng)

    def expire(self):
        """Drop dots that reached the bounce limit. Returns how many were removed."""
        survivors = [dot for dot in self._dots if dot.bounces < self.max_bounces]
        removed = len(self._dots) - len(survivors)
        self._dots = survivors
        self.expired += removed
        return removed

    def clear(self):
        removed = len(self._dots)
        self._dots = []
        self._log.debug(f"store cleared n={removed}")
        return removed

    def snapshot(self):
        return tuple(dot.to_state() for dot in self._dots)

    def get_stats(self):
        return {"live": len(self._dots), "inserted": self.inserted, "expired": self.expired}
