"""Document retrieval helpers (static and browser-rendered)."""
