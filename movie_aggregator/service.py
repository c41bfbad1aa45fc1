"""
Service module.
High-level API behind the HTTP routes: movie and episode lookups, top movies by genre,
and recommendations from a favorite movie.
"""

import time  # request timings
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger  # console logger

from .collector import KeywordCandidateCollector
from .config import Settings
from .exceptions import EpisodeNotFoundError, MovieNotFoundError
from .models import DetailRecord, Recommendation
from .provider_client import ProviderClient
from .ranking import Ranker
from .recommender import RecommendationEngine
from .title_resolver import TitleResolver


@dataclass
class GenreResult:
	genre: str  # genre as requested
	movies: List[DetailRecord]  # ranked, best first


class MovieService:
	"""
	Wires the provider client, resolver, collector, ranker and recommender together.
	Built once at startup; holds no per-request state.
	"""

	def __init__(self, settings: Settings, provider: Optional[ProviderClient] = None):
		self.settings = settings
		# Allow injecting a provider (tests, scripts); otherwise build the real one
		self.provider = provider or ProviderClient(settings)
		self.resolver = TitleResolver(self.provider)
		self.collector = KeywordCandidateCollector(self.provider, seed_keywords=settings.seed_keywords)
		self.ranker = Ranker()
		self.recommender = RecommendationEngine(
			self.resolver,
			self.collector,
			self.ranker,
			target=settings.recommendation_count,
		)
		logger.info(
			f"[Service] Ready with {len(self.collector.seed_keywords)} seed keywords, "
			f"recommendation target {settings.recommendation_count}"
		)

	def lookup_movie(self, title: str) -> DetailRecord:
		"""Exact title lookup with the full plot."""
		record = self.provider.fetch_detail_by_title(title, plot="full")
		if record is None:
			raise MovieNotFoundError()
		return record

	def lookup_episode(self, series_title: str, season: str, episode: str) -> DetailRecord:
		record = self.provider.fetch_episode(series_title, season, episode)
		if record is None:
			raise EpisodeNotFoundError()
		return record

	def top_by_genre(self, genre: str) -> GenreResult:
		"""Sample the catalog for the genre and keep the best-rated titles."""
		start = time.time()
		candidates = self.collector.collect(genre, self.settings.genre_candidate_limit)
		top = self.ranker.top_by_rating(candidates, self.settings.genre_top_n)
		elapsed_ms = (time.time() - start) * 1000
		logger.info(f"[Service] Genre '{genre}': {len(top)} of {len(candidates)} candidates in {elapsed_ms:.0f} ms")
		return GenreResult(genre=genre, movies=top)

	def recommend(self, favorite_title: str) -> Recommendation:
		start = time.time()
		recommendation = self.recommender.recommend(favorite_title)
		elapsed_ms = (time.time() - start) * 1000
		logger.info(
			f"[Service] Recommended {len(recommendation.items)} titles for '{favorite_title}' in {elapsed_ms:.0f} ms"
		)
		return recommendation
