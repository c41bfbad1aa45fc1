"""
Ranking module.
Orders candidates by their IMDb rating, highest first.
"""

import math
from typing import Iterable, List

from .models import DetailRecord, NOT_AVAILABLE


def rating_value(record: DetailRecord) -> float:
	"""
	Parse the numeric rating of a record.
	Missing, empty, "N/A" or malformed values rank as 0.
	"""
	raw = (record.imdb_rating or '').strip()
	if not raw or raw == NOT_AVAILABLE:
		return 0.0
	try:
		value = float(raw)
	except ValueError:
		return 0.0
	# "nan"/"inf" parse as floats but cannot be ordered meaningfully
	return value if math.isfinite(value) else 0.0


class Ranker:
	"""
	Pure ranking over candidate lists; no I/O and the input is never mutated.
	"""

	def top_by_rating(self, candidates: Iterable[DetailRecord], n: int) -> List[DetailRecord]:
		"""Return at most n candidates sorted by descending rating (stable for ties)."""
		if n <= 0:
			return []
		ordered = sorted(candidates, key=rating_value, reverse=True)
		return ordered[:n]
