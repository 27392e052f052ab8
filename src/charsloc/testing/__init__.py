from __future__ import annotations

from .corpus import describe_source, expected_positions, generate_corpus_files, generate_sources

__all__ = ["describe_source", "expected_positions", "generate_corpus_files", "generate_sources"]
