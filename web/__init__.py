"""Flask adapter for iconpack-reconciler."""
