"""Domain layer: incidents, emergency units, dispatching and scoring."""
