"""Domain layer: entities, validation rules and error taxonomy."""
