"""People API: validated person records with nickname uniqueness and free-text search."""
