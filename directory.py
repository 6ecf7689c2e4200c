import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from breed_api import BreedRecord, FetchFailure
from breed_filter import filter_breeds
from translations import DEFAULT_LANGUAGE, get_labels, normalize_language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    loading: bool
    error: Optional[str]
    breeds: Tuple[BreedRecord, ...]
    filtered: Tuple[BreedRecord, ...]
    term: str
    language: str


class BreedDirectory:
    """
    Holds the fetched breed set and the loading/error flags for one language.

    Each mount takes a generation number, and a response is applied only if
    no newer mount started while it was in flight.
    """

    def __init__(self, fetcher, language=DEFAULT_LANGUAGE):
        self._fetcher = fetcher
        self._lock = threading.Lock()
        self._generation = 0
        self.language = normalize_language(language)
        self.breeds = ()
        self.loading = True
        self.error = None
        self.mounted = False

    def mount(self):
        """Fetch the breed list. Returns True if this fetch's result was applied."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            self.loading = True
            self.mounted = True

        breeds = None
        error = None
        current = False
        try:
            breeds = tuple(self._fetcher(self.language))
        except FetchFailure as err:
            logger.error("API Fetch Error: %s", err)
            error = get_labels(self.language)["error"]
        finally:
            with self._lock:
                current = generation == self._generation
                if current:
                    if breeds is not None:
                        self.breeds = breeds
                        self.error = None
                    elif error is not None:
                        self.error = error
                    self.loading = False

        if not current:
            logger.debug("Dropping stale fetch result for language=%s", self.language)
            return False
        return breeds is not None

    def ensure_mounted(self):
        """Mount unless a fetch has already been triggered. Returns True if it fetched."""
        if self.mounted:
            return False
        self.mount()
        return True

    def view_state(self, term=""):
        term = term or ""
        with self._lock:
            loading, error, breeds = self.loading, self.error, self.breeds
        return ViewState(
            loading=loading,
            error=error,
            breeds=breeds,
            filtered=tuple(filter_breeds(breeds, term)),
            term=term,
            language=self.language,
        )
