"""Animated L-system hyphae growth."""
