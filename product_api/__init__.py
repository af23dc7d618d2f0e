"""
Product Management API — Application Package
==============================================

CRUD REST backend for products and categories on MongoDB, with JWT-gated
category routes and generated OpenAPI docs.

Architecture:

    ┌─────────────────────────────────────┐
    │      Routes (API Layer)             │  ← HTTP: paths, bodies, status codes
    ├─────────────────────────────────────┤
    │      Controllers (services/)        │  ← validate, persist, return Result
    ├─────────────────────────────────────┤
    │  Schemas & Models (pydantic)        │  ← request rules, document shapes
    ├─────────────────────────────────────┤
    │      Database (motor / MongoDB)     │  ← one client per process
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
