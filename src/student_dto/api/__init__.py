"""API layer: transfer schemas and the mappers that produce them."""
