"""Sunrise, sunset and twilight calculations and reports."""
