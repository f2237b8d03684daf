"""Servicios del Core: codec, clasificador, consultas y sesión."""
