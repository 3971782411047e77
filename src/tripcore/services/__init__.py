"""
Business services for the trip schedule and fare engine.

- schedule_store.py: persistence of the weekly schedule and per-day overrides
- fare.py: dynamic fare calculation
- progress.py: scheduling flow step indicators
- scenario.py: synthetic trip generation for fixtures
- schedule_rules.py: schedule validation and per-day time resolution
"""

__all__: list[str] = []
