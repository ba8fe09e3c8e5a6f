"""
Domain Layer Package

Weather and energy entities, the solar classifier, the synthetic energy
generator and the interfaces of the repositories, gateways and ports they
depend on. No framework or infrastructure imports live here.
"""

# Re-export submodules
from src.domain import entities, gateways, ports, repositories, services

__all__ = ["entities", "gateways", "repositories", "services", "ports"]
