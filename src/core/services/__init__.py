"""Servicios del Core (orquestación de la ronda)."""
