"""Core: configuración, dominio, errores y orquestación del scraping."""
