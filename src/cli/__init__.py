"""Capa CLI (Typer + Rich): construye dependencias y delega en el Core."""
