"""
Employees Service package for the Employee Management services.

- app.main: Application entrypoint that wires routes and lifecycle.
- app.records: Employee models, seed data and the record manager that applies
  business rules on top of the shared in-memory store.
"""
