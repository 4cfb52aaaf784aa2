"""Service Layer — task use cases orchestrating validation and persistence."""
