"""In-memory client record browser: filtering, sorting and record creation."""
