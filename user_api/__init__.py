"""
User API — root package.

This package contains the FastAPI app entry point (main.py), the /user
routes, the use cases behind them, the domain model, and the MongoDB and
filesystem infrastructure.
"""
