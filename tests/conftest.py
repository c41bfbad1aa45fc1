"""
Shared fixtures: an in-memory provider over a small fixed catalog.
"""

from typing import Dict, List, Optional, Tuple

import pytest

from movie_aggregator.config import Settings
from movie_aggregator.models import DetailRecord, SearchHit


SEED_KEYWORDS = ("the", "a", "man")


def make_payload(imdb_id, title, genre="", director="", actors="", rating="N/A", year="2000"):
	return {
		"Title": title,
		"Year": year,
		"Genre": genre,
		"Director": director,
		"Actors": actors,
		"imdbRating": rating,
		"imdbID": imdb_id,
		"Response": "True",
	}


class FakeProvider:
	"""
	Stands in for ProviderClient.
	`details` maps imdbID -> payload, `titles` maps exact title -> imdbID,
	`searches` maps (keyword, page) -> list of imdbIDs ('' allowed).
	Every call is recorded in `calls`.
	"""

	def __init__(
		self,
		details: Dict[str, dict],
		searches: Optional[Dict[Tuple[str, int], List[str]]] = None,
		titles: Optional[Dict[str, str]] = None,
	):
		self.details = details
		self.searches = searches or {}
		self.titles = titles or {}
		self.calls: List[Tuple] = []

	def fetch_detail_by_id(self, imdb_id):
		self.calls.append(("id", imdb_id))
		payload = self.details.get(imdb_id)
		return DetailRecord.from_payload(payload) if payload else None

	def fetch_detail_by_title(self, title, plot="short"):
		self.calls.append(("title", title, plot))
		imdb_id = self.titles.get(title)
		if imdb_id is None:
			return None
		return DetailRecord.from_payload(self.details[imdb_id])

	def fetch_episode(self, series_title, season, episode):
		self.calls.append(("episode", series_title, season, episode))
		payload = self.details.get(f"{series_title}:{season}:{episode}")
		return DetailRecord.from_payload(payload) if payload else None

	def search_by_keyword(self, keyword, page=1):
		self.calls.append(("search", keyword, page))
		hits = []
		for imdb_id in self.searches.get((keyword, page), []):
			title = self.details.get(imdb_id, {}).get("Title", "")
			hits.append(SearchHit(title=title, imdb_id=imdb_id, type="movie"))
		return hits

	def count(self, kind):
		return sum(1 for c in self.calls if c[0] == kind)


def build_catalog():
	"""
	36 titles: 24 Action (some also Drama), 8 Drama-only by Nolan, 4 Comedy starring Jim Carrey.
	Ratings descend with the id number so order is predictable.
	"""
	details = {}
	for i in range(24):
		imdb_id = f"tt1{i:03d}"
		genre = "Action, Drama" if i % 3 == 0 else "Action, Thriller"
		details[imdb_id] = make_payload(imdb_id, f"Action {i}", genre=genre, director="Someone Else",
			actors="Actor A, Actor B", rating=f"{9.0 - i * 0.1:.1f}")
	for i in range(8):
		imdb_id = f"tt2{i:03d}"
		details[imdb_id] = make_payload(imdb_id, f"Nolan {i}", genre="Drama", director="Christopher Nolan",
			actors="Cillian Murphy", rating=f"{8.0 - i * 0.1:.1f}")
	for i in range(4):
		imdb_id = f"tt3{i:03d}"
		details[imdb_id] = make_payload(imdb_id, f"Carrey {i}", genre="Comedy", director="Someone Else",
			actors="Jim Carrey, Actor C", rating="N/A" if i == 0 else f"{7.0 - i * 0.1:.1f}")

	ids = list(details)
	searches = {
		("the", 1): ids[:14] + [""],
		("a", 1): ids[10:26],  # overlaps "the"
		("man", 1): ids[20:],
	}
	return details, searches


@pytest.fixture
def catalog():
	return build_catalog()


@pytest.fixture
def provider(catalog):
	details, searches = catalog
	return FakeProvider(details, searches)


@pytest.fixture
def settings():
	return Settings(api_key="test-key", seed_keywords=SEED_KEYWORDS)
