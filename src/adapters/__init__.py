"""Adaptadores de I/O: archivo de catálogo y log de errores."""
