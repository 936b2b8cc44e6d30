"""Click command groups for the bomtree CLI."""
