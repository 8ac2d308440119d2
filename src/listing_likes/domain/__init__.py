"""Domain layer - core models, ports and contracts."""
