"""Application layer: normalization, query resolvers, search and statistics."""
