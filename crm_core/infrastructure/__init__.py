"""Infrastructure adapters: concrete logging and persistence."""
