"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan los adaptadores concretos; el Core depende
de estas abstracciones, no de httpx.
"""
