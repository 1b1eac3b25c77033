"""Domain layer - shared building blocks for the demonstrations."""
