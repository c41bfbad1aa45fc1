"""
Recommendation module.
Builds a fixed-size recommendation list from a favorite movie by walking three
fallback phases in order: its genres, then its directors, then its actors.
"""

from typing import List, Set, Tuple

from loguru import logger  # console logger

from .collector import KeywordCandidateCollector
from .config import DEFAULT_RECOMMENDATION_COUNT
from .exceptions import TitleNotFoundError
from .models import DetailRecord, MatchField, Recommendation
from .ranking import Ranker
from .title_resolver import TitleResolver


class RecommendationEngine:
	"""
	Orchestrates resolver, collector and ranker.
	Each phase runs only while the result is still short of `target`; the seed's
	own id is seeded into the seen set so it is never recommended.
	"""

	def __init__(
		self,
		resolver: TitleResolver,
		collector: KeywordCandidateCollector,
		ranker: Ranker,
		target: int = DEFAULT_RECOMMENDATION_COUNT,
	):
		self.resolver = resolver
		self.collector = collector
		self.ranker = ranker
		self.target = target

	def recommend(self, favorite_title: str) -> Recommendation:
		"""Resolve the favorite and return it with up to `target` recommendations."""
		seed = self.resolver.resolve(favorite_title)
		if seed is None:
			raise TitleNotFoundError(favorite_title)
		logger.info(f"[Recommender] Seed '{seed.title}' ({seed.imdb_id}) for query '{favorite_title}'")

		seen: Set[str] = set()
		if seed.imdb_id:
			seen.add(seed.imdb_id)
		result: List[DetailRecord] = []

		phases: List[Tuple[MatchField, List[str]]] = [
			(MatchField.GENRE, seed.genres),
			(MatchField.DIRECTOR, seed.directors),
			(MatchField.ACTORS, seed.actor_names),
		]
		for field, terms in phases:
			if len(result) >= self.target:
				break
			before = len(result)
			self._run_phase(field, terms, seen, result)
			logger.debug(f"[Recommender] {field.value} phase added {len(result) - before} (total {len(result)})")

		return Recommendation(seed=seed, items=result[:self.target])

	def _run_phase(self, field: MatchField, terms: List[str], seen: Set[str], result: List[DetailRecord]) -> None:
		# Mutates `seen` and `result` in place
		for term in terms:
			candidates = self.collector.collect(term, self.target, field=field)
			for record in self.ranker.top_by_rating(candidates, self.target):
				if not record.imdb_id or record.imdb_id in seen:
					continue
				seen.add(record.imdb_id)
				result.append(record)
				if len(result) >= self.target:
					return
