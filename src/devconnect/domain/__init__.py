"""Domain layer: user identity and profile."""
