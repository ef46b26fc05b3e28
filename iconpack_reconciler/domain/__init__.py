"""Domain models for resource documents."""
