"""Search orchestration exports for paperfinder."""

from __future__ import annotations

from .orchestrator import FIRST_AUDIO_YEAR, PaperSearch
from .strategies import (
    AuxiliaryPaper2Search,
    BroaderAudioSearch,
    GlobalAudioSearch,
    ScopedAudioSearch,
    SearchStrategy,
    StrategyResult,
    merge_distinct,
    run_escalating,
)

__all__ = [
    "PaperSearch",
    "FIRST_AUDIO_YEAR",
    "SearchStrategy",
    "StrategyResult",
    "ScopedAudioSearch",
    "BroaderAudioSearch",
    "GlobalAudioSearch",
    "AuxiliaryPaper2Search",
    "run_escalating",
    "merge_distinct",
]
