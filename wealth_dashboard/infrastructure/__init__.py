"""Infrastructure adapters: storage, settings, logging and wiring."""
