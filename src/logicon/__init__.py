"""
Core query layer for Logicon.

Freshness filtering of vehicle positions, proximity ranking of freight
opportunities and revenue rollups live here. Lambda handlers in src/handlers/
are thin wrappers that call into logicon/.
"""

__version__ = "1.0.0"

__all__: list[str] = ["__version__"]
