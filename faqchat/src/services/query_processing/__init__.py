"""Query processing package tying retrieval and generation together."""

from .prompt_builder import build_augmented_prompt
from .query_processing_service import QueryProcessingService

__all__ = ["QueryProcessingService", "build_augmented_prompt"]
