"""Domain layer: asset object model, reconciliation rules and diagnostics."""
