"""
FastAPI server exposing the movie aggregation API.
Endpoints:
- GET /health: basic health check
- GET /api/movie?title=...: single movie lookup
- GET /api/episode?series_title=...&season=...&episode_number=...: single episode lookup
- GET /api/movies/genre?genre=...: best-rated movies of a genre
- GET /api/recommend?favorite_movie=...: recommendations from a favorite movie

Startup loads settings from the environment (.env supported) and fails when OMDB_API_KEY is missing.
"""

# Import standard libraries for timing and logging sinks
import sys  # stderr sink for loguru
import time  # measure startup latency
from typing import Dict, List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import Depends, FastAPI, Request, status  # FastAPI primitives
from fastapi.responses import JSONResponse  # error payloads
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration and the service facade
from movie_aggregator.config import Settings  # environment-backed settings
from movie_aggregator.exceptions import AppError, ClientInputError  # mapped errors
from movie_aggregator.models import DetailRecord  # provider records
from movie_aggregator.service import MovieService  # core aggregation service

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Aggregator API", version="1.0.0")  # web app

# Globals that hold the service instance and measured startup time
SERVICE: Optional[MovieService] = None  # will point to the initialized service
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic models that describe the response payloads (provider field names kept as-is)
class MovieOut(BaseModel):
	Title: str
	Year: str
	Plot: str
	Country: str
	Awards: str
	Director: str
	Ratings: List[Dict[str, str]]


class EpisodeOut(BaseModel):
	Title: str
	Season: str
	Episode: str
	Released: str
	Plot: str
	imdbRating: str


class GenreMovieOut(BaseModel):
	Title: str
	Year: str
	imdbID: str
	Genre: str
	imdbRating: str


class GenreResponse(BaseModel):
	genre: str  # genre as requested
	count: int  # number of movies returned
	movies: List[GenreMovieOut]  # best rated first


class RecommendationOut(BaseModel):
	Title: str
	Year: str
	imdbID: str
	Genre: str
	Director: str
	Actors: str
	imdbRating: str


class RecommendResponse(BaseModel):
	favorite_movie: str  # resolved title of the seed movie
	recommendations: List[RecommendationOut]


# Errors are rendered as {"error": "..."} with the status the error carries
@app.exception_handler(AppError)
async def app_error_handler(_: Request, exc: AppError):
	logger.warning(f"[API] {exc.status_code} Error: {exc.detail}")
	return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def generic_exception_handler(_: Request, exc: Exception):
	logger.exception(f"[API] Unhandled error: {exc}")
	return JSONResponse(
		status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
		content={"error": "An unexpected error occurred."},
	)


# FastAPI startup hook to initialize the service once
@app.on_event("startup")
async def startup_event():
	"""Load settings, configure logging and build the service."""
	global SERVICE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = Settings.from_env()  # raises StartupConfigError without an API key

	# Route loguru to stderr at the configured level
	logger.remove()
	logger.add(sys.stderr, level=settings.log_level)

	logger.info("[API] Startup: building provider client and service...")  # log intent
	SERVICE = MovieService(settings)  # create service

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s.")  # summary log


def get_service() -> MovieService:
	"""Dependency returning the service built at startup."""
	if SERVICE is None:
		raise AppError("service not initialized")
	return SERVICE


def require(value: Optional[str], message: str) -> str:
	# Missing and empty query parameters are both client errors
	if not value:
		raise ClientInputError(message)
	return value


def require_number(value: Optional[str], name: str) -> str:
	value = require(value, "missing parameters")
	# isdigit alone also accepts non-ASCII digits such as "²"
	if not (value.isascii() and value.isdigit()):
		raise ClientInputError(f"{name} must be a number")
	return value


def _genre_movie(m: DetailRecord) -> GenreMovieOut:
	return GenreMovieOut(Title=m.title, Year=m.year, imdbID=m.imdb_id, Genre=m.genre, imdbRating=m.imdb_rating)


def _recommendation(m: DetailRecord) -> RecommendationOut:
	return RecommendationOut(
		Title=m.title,
		Year=m.year,
		imdbID=m.imdb_id,
		Genre=m.genre,
		Director=m.director,
		Actors=m.actors,
		imdbRating=m.imdb_rating,
	)


# Simple health endpoint for readiness checks
@app.get("/health")
def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"provider_ready": SERVICE is not None,  # True once startup finished
		"startup_seconds": round(STARTUP_TIME_S, 2),  # startup latency
	}


# Route functions are sync: FastAPI runs them in its threadpool while they block on the provider
@app.get("/api/movie", response_model=MovieOut)
def movie(title: Optional[str] = None, service: MovieService = Depends(get_service)):
	"""Look up one movie by exact title."""
	title = require(title, "missing title")
	logger.debug(f"[API] /api/movie title='{title}'")
	m = service.lookup_movie(title)
	return MovieOut(
		Title=m.title,
		Year=m.year,
		Plot=m.plot,
		Country=m.country,
		Awards=m.awards,
		Director=m.director,
		Ratings=m.ratings,
	)


@app.get("/api/episode", response_model=EpisodeOut)
def episode(
	series_title: Optional[str] = None,
	season: Optional[str] = None,
	episode_number: Optional[str] = None,
	service: MovieService = Depends(get_service),
):
	"""Look up one episode of a series."""
	series_title = require(series_title, "missing parameters")
	season = require_number(season, "season")
	episode_number = require_number(episode_number, "episode_number")
	logger.debug(f"[API] /api/episode '{series_title}' S{season}E{episode_number}")
	e = service.lookup_episode(series_title, season, episode_number)
	return EpisodeOut(
		Title=e.title,
		Season=e.season,
		Episode=e.episode,
		Released=e.released,
		Plot=e.plot,
		imdbRating=e.imdb_rating,
	)


@app.get("/api/movies/genre", response_model=GenreResponse)
def movies_by_genre(genre: Optional[str] = None, service: MovieService = Depends(get_service)):
	"""Return the best-rated movies found for a genre."""
	genre = require(genre, "missing genre")
	result = service.top_by_genre(genre)
	movies = [_genre_movie(m) for m in result.movies]
	return GenreResponse(genre=result.genre, count=len(movies), movies=movies)


@app.get("/api/recommend", response_model=RecommendResponse)
def recommend(favorite_movie: Optional[str] = None, service: MovieService = Depends(get_service)):
	"""Recommend movies similar to a favorite one."""
	favorite_movie = require(favorite_movie, "missing favorite_movie")
	rec = service.recommend(favorite_movie)
	return RecommendResponse(
		favorite_movie=rec.seed.title,
		recommendations=[_recommendation(m) for m in rec.items],
	)
