"""Scale Comparison: durations animated on a shared logarithmic scale."""
