# Services package init
"""
Product Management API — Controllers
======================================

What:  Per-entity operations sitting between routes (HTTP) and MongoDB.
How:   Each controller is constructed per request with the injected database
       handle and returns `Result` values; routes translate them to responses.

Controller Inventory:
    - DocumentService (generic): create / list / get / update / delete
    - CategoryService: categories collection, partial updates
    - ProductService: products collection, full-body updates, timestamps
    - AuthService: user registration, login, token issue and verification
"""
