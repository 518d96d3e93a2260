# page_digest/__init__.py
"""
PageDigest package initializer.
Defines package version and exposes the public pipeline API.
"""
__version__ = "0.1.0"

from .config import DigestConfig, build_config, load_config
from .errors import ConfigurationError, DigestError, FetchError, ParseError, SummarizerInputError
from .models import Job, JobState, PageResult, WordFrequency
from .pipeline import Pipeline

__all__ = [
    "__version__",
    "DigestConfig",
    "build_config",
    "load_config",
    "ConfigurationError",
    "DigestError",
    "FetchError",
    "ParseError",
    "SummarizerInputError",
    "Job",
    "JobState",
    "PageResult",
    "WordFrequency",
    "Pipeline",
]
