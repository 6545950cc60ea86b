"""Rule-generation engine: resolution, synthesis, registry and processing."""
