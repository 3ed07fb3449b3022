"""Infrastructure layer: wire codec and third-party adapters."""
