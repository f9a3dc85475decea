"""Core: configuración, dominio, contratos y errores (sin I/O)."""
