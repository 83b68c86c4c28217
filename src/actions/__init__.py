"""GitHub Action helpers: inputs, outputs and dependency lookups."""
