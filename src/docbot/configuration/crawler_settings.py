from typing import Any, Dict

DEFAULT_MAX_CONCURRENCY = 10
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_RESULTS = 5


class CrawlerSettings:
    """Helper exposing typed accessors for the ``crawler`` configuration block.

    Values that are missing, malformed or non-positive fall back to the
    defaults so a bad config file cannot disable the concurrency gate.
    """

    def __init__(self, data: Dict[str, Any] | None = None) -> None:
        self.data: Dict[str, Any] = data or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for `key` or `default` if missing."""
        return self.data.get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        """Return the underlying mapping."""
        return self.data

    def _positive(self, key: str, default: float, cast) -> Any:
        try:
            value = cast(self.data.get(key, default))
        except (TypeError, ValueError):
            return default
        return value if value > 0 else default

    @property
    def max_concurrency(self) -> int:
        return self._positive("max_concurrency", DEFAULT_MAX_CONCURRENCY, int)

    @property
    def request_timeout_seconds(self) -> float:
        return self._positive("request_timeout_seconds", DEFAULT_REQUEST_TIMEOUT_SECONDS, float)

    @property
    def max_results(self) -> int:
        return self._positive("max_results", DEFAULT_MAX_RESULTS, int)
