"""Application layer - services and runnable demos."""
