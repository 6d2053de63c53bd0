"""Domain layer: entities, entity families, ordering policy and protocols."""
