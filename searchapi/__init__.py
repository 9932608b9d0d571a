"""
Search response transformer.

Turns raw multi-search responses from the search backend into the stable,
versioned v1 public API shape:
1. Decode the backend envelope
2. Merge sub-responses (items, content types, suggestions, timing)
3. Rebuild highlighted match spans from inline markup
4. Fall back to query-term suggestions when nothing matched
"""
