"""Domain layer: content records independent of transport and storage."""
