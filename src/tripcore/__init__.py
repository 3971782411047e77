"""
Core business logic package for the trip schedule and fare engine.

All business logic, persistence, and pricing rules live here.
Lambda handlers in src/handlers/ are thin wrappers that call into tripcore/.
"""

__all__: list[str] = []
