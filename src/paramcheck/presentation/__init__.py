"""paramcheck presentation layer: pytest plugin."""
