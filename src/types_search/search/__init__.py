"""
In-memory search over the type-definitions index.

This package provides the searchable core:
- tokenizer: record and query tokenizers (whole-field tokens, optional case folding)
- record_store: immutable record set with an inverted token index
- ranker: exact-name promotion, then popularity ordering
- fuzzy: edit-distance suggestions for queries that match nothing
"""
