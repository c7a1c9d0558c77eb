"""
FastAPI routers module.

- chiron: text intake that triggers extraction
- siren: record listing, deletion and direct insertion
- health: service health
"""

from . import chiron, health, siren

__all__ = [
    "chiron",
    "health",
    "siren",
]
