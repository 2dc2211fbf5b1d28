"""js_scout.crawler: fetching, extraction and breadth-first traversal."""
