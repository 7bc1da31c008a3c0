"""
Tasks bounded context: domain layer.

This module contains all domain logic for the tasks context:
- Task lifecycle (creation, completion toggle, cancellation)
- Referenced entities (users, categories, tags)
"""
