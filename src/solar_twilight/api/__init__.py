"""Public API of solar-twilight."""
