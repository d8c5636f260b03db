"""Side-effect-free helpers shared by provider adapters."""
