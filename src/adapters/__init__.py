"""Adaptadores concretos: transporte httpx y exportación JSON."""
