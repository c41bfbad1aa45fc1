"""
Unit tests for KeywordCandidateCollector: filtering, dedup and early stop.
"""

from conftest import SEED_KEYWORDS, FakeProvider, make_payload

from movie_aggregator.collector import KeywordCandidateCollector
from movie_aggregator.models import MatchField


def ids(records):
	return [r.imdb_id for r in records]


def test_collects_genre_matches_without_duplicates(provider):
	collector = KeywordCandidateCollector(provider, seed_keywords=SEED_KEYWORDS)

	found = collector.collect("drama", 100)

	# 8 Action/Drama titles plus 8 Nolan dramas; "the" and "a" overlap on tt1010..tt1013
	assert len(found) == 16
	assert len(set(ids(found))) == len(found)
	assert all("drama" in r.genre.lower() for r in found)


def test_each_title_is_fetched_once(provider):
	collector = KeywordCandidateCollector(provider, seed_keywords=SEED_KEYWORDS)

	collector.collect("Action", 100)

	fetched = [c[1] for c in provider.calls if c[0] == "id"]
	assert len(fetched) == len(set(fetched)) == 36
	assert "" not in fetched


def test_stops_once_limit_reached(provider):
	collector = KeywordCandidateCollector(provider, seed_keywords=SEED_KEYWORDS)

	found = collector.collect("Action", 5)

	assert ids(found) == ["tt1000", "tt1001", "tt1002", "tt1003", "tt1004"]
	# Only the first seed keyword was needed
	assert provider.count("search") == 1
	assert provider.count("id") == 5


def test_only_page_one_of_each_seed_is_searched(provider):
	collector = KeywordCandidateCollector(provider, seed_keywords=SEED_KEYWORDS)

	collector.collect("Western", 10)

	searches = [c for c in provider.calls if c[0] == "search"]
	assert searches == [("search", k, 1) for k in SEED_KEYWORDS]


def test_filters_on_selected_field(provider):
	collector = KeywordCandidateCollector(provider, seed_keywords=SEED_KEYWORDS)

	by_director = collector.collect("christopher nolan", 20, field=MatchField.DIRECTOR)
	by_actor = collector.collect("Jim Carrey", 20, field=MatchField.ACTORS)

	assert ids(by_director) == [f"tt2{i:03d}" for i in range(8)]
	assert ids(by_actor) == [f"tt3{i:03d}" for i in range(4)]


def test_genre_field_ignores_people(provider):
	collector = KeywordCandidateCollector(provider, seed_keywords=SEED_KEYWORDS)

	assert collector.collect("Christopher Nolan", 20) == []


def test_empty_filter_or_limit_makes_no_calls(provider):
	collector = KeywordCandidateCollector(provider, seed_keywords=SEED_KEYWORDS)

	assert collector.collect("", 10) == []
	assert collector.collect("   ", 10) == []
	assert collector.collect("Action", 0) == []
	assert provider.calls == []


def test_failed_detail_fetch_is_skipped():
	details = {"tt1": make_payload("tt1", "One", genre="Horror")}
	fake = FakeProvider(details, {("the", 1): ["tt404", "tt1"]})
	collector = KeywordCandidateCollector(fake, seed_keywords=["the"])

	assert ids(collector.collect("horror", 5)) == ["tt1"]


def test_missing_detail_id_is_filled_from_search_hit():
	payload = make_payload("", "No Id", genre="Horror")
	fake = FakeProvider({"tt7": payload}, {("the", 1): ["tt7"]})
	collector = KeywordCandidateCollector(fake, seed_keywords=["the"])

	assert ids(collector.collect("horror", 5)) == ["tt7"]


def test_ids_resolving_to_same_record_are_admitted_once():
	canonical = make_payload("tt-new", "Merged", genre="Horror")
	fake = FakeProvider(
		{"tt-old": canonical, "tt-new": canonical},
		{("the", 1): ["tt-old", "tt-new"], ("a", 1): ["tt-new"]},
	)
	collector = KeywordCandidateCollector(fake, seed_keywords=["the", "a"])

	found = collector.collect("horror", 5)

	assert ids(found) == ["tt-new"]
	# The canonical id counts as examined, so its own search hit is not fetched again
	assert fake.count("id") == 1
