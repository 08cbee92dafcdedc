"""Command-line interface for solar-twilight."""
