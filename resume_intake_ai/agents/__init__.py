"""Agent exports."""

from .extractor_agent import ExtractionOrchestrator, classify_model_error, probe_models

__all__ = ["ExtractionOrchestrator", "classify_model_error", "probe_models"]
