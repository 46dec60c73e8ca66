"""Core: dominio, configuración, contratos y servicios de la consulta de realm."""
