"""
Data models for the Movie Aggregator.
Typed views over the provider's JSON payloads used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
from enum import Enum  # closed set of attribute fields
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, List


# Value the provider uses for "no data" in string fields
NOT_AVAILABLE = "N/A"


class MatchField(str, Enum):
	"""Detail fields a candidate collector can filter on."""
	GENRE = "Genre"
	DIRECTOR = "Director"
	ACTORS = "Actors"


def _text(payload: Dict[str, Any], key: str) -> str:
	# Absent or non-string values collapse to the empty string
	value = payload.get(key)
	return value if isinstance(value, str) else ''


def _ratings(value: Any) -> List[Dict[str, str]]:
	# Keep dict entries only, with Source and Value coerced to strings
	if not isinstance(value, list):
		return []
	return [
		{key: '' if r.get(key) is None else str(r.get(key)) for key in ('Source', 'Value')}
		for r in value
		if isinstance(r, dict)
	]


def split_terms(value: str) -> List[str]:
	"""
	Split a comma-separated provider field into trimmed terms.
	Empty pieces and the "N/A" placeholder are dropped.
	"""
	if not value:
		return []
	terms = [item.strip() for item in value.split(',')]
	return [t for t in terms if t and t != NOT_AVAILABLE]


@dataclass
class DetailRecord:
	"""
	Full metadata for one title or episode as returned by the provider.
	Every field is a plain string; missing values are stored as ''.
	"""
	imdb_id: str  # stable external identifier
	title: str = ''
	year: str = ''
	genre: str = ''  # comma-separated genre names
	director: str = ''  # comma-separated director names
	actors: str = ''  # comma-separated actor names
	imdb_rating: str = ''  # decimal string or "N/A"
	response: str = ''  # "True"/"False" from the provider, '' when built locally
	plot: str = ''
	country: str = ''
	awards: str = ''
	type: str = ''
	season: str = ''
	episode: str = ''
	released: str = ''
	ratings: List[Dict[str, str]] = field(default_factory=list)  # [{"Source": ..., "Value": ...}]

	@classmethod
	def from_payload(cls, payload: Dict[str, Any]) -> 'DetailRecord':
		"""Build a record from a decoded provider body."""
		return cls(
			imdb_id=_text(payload, 'imdbID'),
			title=_text(payload, 'Title'),
			year=_text(payload, 'Year'),
			genre=_text(payload, 'Genre'),
			director=_text(payload, 'Director'),
			actors=_text(payload, 'Actors'),
			imdb_rating=_text(payload, 'imdbRating'),
			response=_text(payload, 'Response'),
			plot=_text(payload, 'Plot'),
			country=_text(payload, 'Country'),
			awards=_text(payload, 'Awards'),
			type=_text(payload, 'Type'),
			season=_text(payload, 'Season'),
			episode=_text(payload, 'Episode'),
			released=_text(payload, 'Released'),
			ratings=_ratings(payload.get('Ratings')),
		)

	def attribute(self, match_field: MatchField) -> str:
		"""Return the raw comma-separated value of a filterable field."""
		if match_field is MatchField.GENRE:
			return self.genre
		if match_field is MatchField.DIRECTOR:
			return self.director
		return self.actors

	@property
	def genres(self) -> List[str]:
		return split_terms(self.genre)

	@property
	def directors(self) -> List[str]:
		return split_terms(self.director)

	@property
	def actor_names(self) -> List[str]:
		return split_terms(self.actors)


@dataclass
class SearchHit:
	"""
	Lightweight row of a keyword search.
	imdb_id may be empty; such hits are skipped by every consumer.
	"""
	title: str
	imdb_id: str
	type: str = ''

	@classmethod
	def from_payload(cls, payload: Dict[str, Any]) -> 'SearchHit':
		return cls(
			title=_text(payload, 'Title'),
			imdb_id=_text(payload, 'imdbID'),
			type=_text(payload, 'Type'),
		)


@dataclass
class Recommendation:
	"""Resolved favorite movie plus the ordered list recommended from it."""
	seed: DetailRecord
	items: List[DetailRecord]
