"""Parse result carriers."""

from tydpy.pipeline.result import TydParseResult

__all__ = ["TydParseResult"]
