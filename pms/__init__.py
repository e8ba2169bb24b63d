"""
PMS Application Package

Preventive-maintenance JSON API. This package contains:
- api: FastAPI application, routes and response schemas
- db: MongoDB client and document helpers
- services: task recurrence and user registration rules
- tests: unit test suites
"""
