"""Servicios de orquestación (pipeline índice -> detalles)."""
