"""Figures: grid/path rendering, DP table heatmap, runtime curves."""
