"""Daily workout generator backed by a weighted exercise catalog."""
