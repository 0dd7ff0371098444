"""Application layer: use case orchestration over the core and boundary layers."""
