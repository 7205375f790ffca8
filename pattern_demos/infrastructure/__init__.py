"""Infrastructure layer - concrete pattern implementations and wiring."""
