"""Domain layer: entities and the protocols infrastructure must satisfy."""
