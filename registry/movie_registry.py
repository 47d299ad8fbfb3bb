"""In-memory movie registry"""
import logging
import random
import threading

from config import Config


logger = logging.getLogger(__name__)


class RegistryFullError(RuntimeError):
    """Every id in the configured range is already taken"""


class MovieRegistry:
    """
    Process-wide store of movies keyed by id

    Every stored movie has its id equal to its key. Movies are copied on the
    way in and on the way out.
    """

    MAX_RANDOM_DRAWS = 32

    def __init__(self, id_limit=None, rng=None):
        self.id_limit = id_limit if id_limit is not None else Config.MOVIE_ID_LIMIT
        self._rng = rng or random.Random()
        self._movies = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._movies)

    def __contains__(self, movie_id):
        with self._lock:
            return movie_id in self._movies

    def list(self):
        with self._lock:
            return {movie_id: movie.with_id(movie_id) for movie_id, movie in self._movies.items()}

    def get(self, movie_id):
        with self._lock:
            movie = self._movies.get(movie_id)
            return movie.with_id(movie_id) if movie is not None else None

    def insert(self, movie):
        """
        Store a new movie under a freshly drawn id

        Ids are random integers in [0, id_limit) rendered as decimal strings.
        A drawn id that is already taken is drawn again.

        Returns:
            Movie: the stored copy, carrying its new id
        """
        with self._lock:
            movie_id = self._next_id()
            stored = movie.with_id(movie_id)
            self._movies[movie_id] = stored

        logger.info(f"Inserted movie {movie_id}")
        return stored.with_id(movie_id)

    def replace(self, movie_id, movie):
        """Overwrite an existing movie, returns None if the id is unknown"""
        with self._lock:
            if movie_id not in self._movies:
                return None

            stored = movie.with_id(movie_id)
            self._movies[movie_id] = stored

        logger.info(f"Replaced movie {movie_id}")
        return stored.with_id(movie_id)

    def load(self, movies):
        """Bulk load movies that already carry their ids"""
        with self._lock:
            for movie in movies:
                self._movies[movie.id] = movie.with_id(movie.id)
            count = len(self._movies)

        logger.info(f"Loaded {count} movies")
        return count

    def clear(self):
        with self._lock:
            count = len(self._movies)
            self._movies.clear()
            return count

    def _next_id(self):
        # caller holds the lock
        for _ in range(self.MAX_RANDOM_DRAWS):
            movie_id = str(self._rng.randrange(self.id_limit))
            if movie_id not in self._movies:
                return movie_id

        # dense registry, walk the range from a random start
        start = self._rng.randrange(self.id_limit)
        for offset in range(self.id_limit):
            movie_id = str((start + offset) % self.id_limit)
            if movie_id not in self._movies:
                return movie_id

        raise RegistryFullError(f'All {self.id_limit} movie ids are taken')
