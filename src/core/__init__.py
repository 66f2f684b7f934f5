"""Core: dominio, contratos y servicios del cliente Echo Nest (sin CLI)."""
