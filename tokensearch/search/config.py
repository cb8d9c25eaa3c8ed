"""Configuration for token search."""

from dataclasses import dataclass, field, replace
import re
from typing import Any, Mapping, Protocol

from .postprocess import Postprocessor, postprocess
from .ranker import DEFAULT_TIE_BREAK_KEY, Sorter, sort_results
from .scorer import Scorer, score_token
from .tokenize import DEFAULT_DELIMITER, Delimiter


class PreprocessCheck(Protocol):
    def __call__(self, record: Mapping[str, Any]) -> bool: ...


def accept_all(record: Mapping[str, Any]) -> bool:
    return True


# Options that may be set from plain data (collection files, CLI) and the
# types their values must have.
_DATA_OPTIONS: dict[str, tuple[type, ...]] = {
    "threshold": (int, float),
    "max_query_tokens": (int,),
    "unique": (bool,),
    "tie_break_key": (str, type(None)),
    "delimiter": (str,),
    "delimiter_pattern": (str,),
}


def _check_option_type(name: str, value: Any) -> None:
    expected = _DATA_OPTIONS[name]
    if isinstance(value, bool) and bool not in expected:
        raise ValueError(f"Option {name} must not be a boolean, got {value!r}")
    if not isinstance(value, expected):
        names = " or ".join(t.__name__ for t in expected)
        raise ValueError(f"Option {name} must be {names}, got {value!r}")


@dataclass(frozen=True)
class SearchConfig:
    """Constants and strategies controlling indexing and ranking."""

    keys: tuple[str, ...] = ()
    delimiter: Delimiter = DEFAULT_DELIMITER
    threshold: float = 0.7
    max_query_tokens: int = 5
    unique: bool = False
    tie_break_key: str | None = DEFAULT_TIE_BREAK_KEY

    scorer: Scorer = field(default=score_token, compare=False)
    postprocessor: Postprocessor = field(default=postprocess, compare=False)
    sorter: Sorter = field(default=sort_results, compare=False)
    preprocess_check: PreprocessCheck = field(default=accept_all, compare=False)

    def __post_init__(self):
        if isinstance(self.keys, str):
            object.__setattr__(self, "keys", (self.keys,))
        else:
            object.__setattr__(self, "keys", tuple(self.keys))
        object.__setattr__(self, "threshold", self.check_threshold(self.threshold))
        if self.delimiter == "":
            raise ValueError("delimiter must not be empty")
        if not isinstance(self.max_query_tokens, int) or isinstance(
            self.max_query_tokens, bool
        ):
            raise ValueError(
                f"max_query_tokens must be an integer, got {self.max_query_tokens!r}"
            )
        if self.max_query_tokens < 1:
            raise ValueError(
                f"max_query_tokens must be positive, got {self.max_query_tokens}"
            )

    @staticmethod
    def check_threshold(threshold: float) -> float:
        """Validate a threshold in [0, 1] and return it as float."""
        if not isinstance(threshold, (int, float)) or isinstance(threshold, bool):
            raise ValueError(f"threshold must be a number, got {threshold!r}")
        value = float(threshold)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        return value

    def with_overrides(self, **overrides: Any) -> "SearchConfig":
        """Return a copy with some fields replaced."""
        if not overrides:
            return self
        return replace(self, **overrides)

    @classmethod
    def from_mapping(
        cls,
        keys: list[str] | tuple[str, ...],
        options: Mapping[str, Any] | None = None,
    ) -> "SearchConfig":
        """Build a config from plain data such as a collection file block.

        ``delimiter`` is split on literally, ``delimiter_pattern`` is a regex.
        """
        options = dict(options or {})
        unknown = sorted(set(options) - set(_DATA_OPTIONS))
        if unknown:
            raise ValueError(f"Unknown search options: {', '.join(unknown)}")
        for name, value in options.items():
            _check_option_type(name, value)

        pattern = options.pop("delimiter_pattern", None)
        if pattern is not None:
            if "delimiter" in options:
                raise ValueError("Use either delimiter or delimiter_pattern, not both")
            try:
                options["delimiter"] = re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"Invalid delimiter_pattern {pattern!r}: {exc}") from exc

        return cls(keys=tuple(keys), **options)
