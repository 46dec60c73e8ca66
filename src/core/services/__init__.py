"""Servicios del Core: construcción de la query, normalización y orquestación."""
