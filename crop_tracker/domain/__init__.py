"""Domain layer: entities, date arithmetic, use cases and repository interfaces."""
