"""Domain layer: exceptions and repository protocols."""
