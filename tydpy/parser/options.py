"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

DEFAULT_MAX_DEPTH: Final[int] = 200


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar leniency and resource limits."""

    mode: ParseMode = ParseMode.STRICT
    allow_valueless_records: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                allow_valueless_records=True,
            )

        return ParserOptions(
            mode=mode,
            allow_valueless_records=False,
        )
