"""Keyphrase extraction and evaluation.

This package provides:
- n-gram candidate generation with stopword boundary filtering
- a tf * idf * relative-position scorer with an optional POS boost (spaCy)
- a RAKE-style degree scorer
- top-K ranking and precision evaluation against reference keywords
- a fixed-width report over all configured models
"""
