"""Application layer – use cases and pipeline orchestration."""

from broll_organizer.application.cascade import TermCascadeResolver
from broll_organizer.application.pipeline import FootagePipeline
from broll_organizer.application.selector import select_best

__all__ = ["FootagePipeline", "TermCascadeResolver", "select_best"]
