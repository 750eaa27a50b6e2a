"""
Service layer abstraction.

Each service encapsulates the business rules for one part of the
catalog.  Services receive the store they operate on as an argument,
so handlers stay thin and tests can drive services directly.
"""
