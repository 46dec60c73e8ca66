"""Adaptadores de infraestructura (httpx, logging, exportación)."""
