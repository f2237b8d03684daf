"""Core del tracker: dominio, contratos, servicios y configuración."""
