"""
Process-wide configuration.
Values come from the environment (optionally a .env file) and are frozen for the process lifetime.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv  # .env support for local runs

from .exceptions import StartupConfigError


DEFAULT_BASE_URL = "https://www.omdbapi.com/"
DEFAULT_TIMEOUT_SECONDS = 10.0
# Generic probes that surface a broad sample of the catalog
DEFAULT_SEED_KEYWORDS: Tuple[str, ...] = (
	"the", "a", "man", "love", "star", "dark", "king", "matrix", "avengers",
)
DEFAULT_RECOMMENDATION_COUNT = 20
DEFAULT_GENRE_CANDIDATE_LIMIT = 150
DEFAULT_GENRE_TOP_N = 15


def _env_positive_int(name: str, default: int) -> int:
	"""Read an environment variable as a positive integer with a safe default."""
	raw = os.getenv(name)
	if raw is None:
		return default
	try:
		value = int(raw)
	except ValueError:
		return default
	return value if value > 0 else default


def _env_positive_float(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None:
		return default
	try:
		value = float(raw)
	except ValueError:
		return default
	return value if value > 0 else default


def _env_keywords(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
	raw = os.getenv(name)
	if not raw:
		return default
	keywords = tuple(k.strip() for k in raw.split(',') if k.strip())
	return keywords or default


@dataclass(frozen=True)
class Settings:
	"""
	Immutable settings shared by the provider client and the service layer.
	Build with Settings.from_env() at startup, or directly in tests.
	"""
	api_key: str
	base_url: str = DEFAULT_BASE_URL
	timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
	seed_keywords: Tuple[str, ...] = field(default=DEFAULT_SEED_KEYWORDS)
	recommendation_count: int = DEFAULT_RECOMMENDATION_COUNT
	genre_candidate_limit: int = DEFAULT_GENRE_CANDIDATE_LIMIT
	genre_top_n: int = DEFAULT_GENRE_TOP_N
	log_level: str = "INFO"
	user_agent: str = "movie-aggregator/1.0"

	@classmethod
	def from_env(cls, dotenv_path: Optional[str] = None) -> 'Settings':
		"""Load settings from the environment; a missing API key aborts startup."""
		load_dotenv(dotenv_path)  # never overrides variables already set
		api_key = (os.getenv("OMDB_API_KEY") or "").strip()
		if not api_key:
			raise StartupConfigError("OMDB_API_KEY missing from environment/.env")
		return cls(
			api_key=api_key,
			base_url=os.getenv("OMDB_BASE_URL") or DEFAULT_BASE_URL,
			timeout_seconds=_env_positive_float("OMDB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
			seed_keywords=_env_keywords("SEED_KEYWORDS", DEFAULT_SEED_KEYWORDS),
			recommendation_count=_env_positive_int("RECOMMENDATION_COUNT", DEFAULT_RECOMMENDATION_COUNT),
			genre_candidate_limit=_env_positive_int("GENRE_CANDIDATE_LIMIT", DEFAULT_GENRE_CANDIDATE_LIMIT),
			genre_top_n=_env_positive_int("GENRE_TOP_N", DEFAULT_GENRE_TOP_N),
			log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
		)
