# Schemas package init
"""
Product Management API — Request/Response Schemas
===================================================

What:  Pydantic models describing the API contract.
Why:   Request schemas drive validation (see `product_api.validation`);
       response schemas drive the generated OpenAPI docs.

Each request schema declares a `messages` table mapping
(field, pydantic error type) to the human-readable text returned in a 400.
Anything not in the table falls back to a generic per-type message.
"""
