"""Field resolvers, kept apart from the type definitions."""
