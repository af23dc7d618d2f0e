"""
Product Management API — Document Models
==========================================

What:  Shapes of the documents stored in MongoDB, one module per collection.
Why:   Controllers read raw dicts from motor; these models turn them into
       typed objects and control exactly what is serialized back to clients
       (`_id` as a hex string, passwords never).
How:   Each module exposes its collection name, a pydantic model built with
       `model_validate(raw_document)`, and a `new_document()` builder used on
       insert.

Collections:
    categories  (unique index on categoryId)
    products    (no indexes beyond _id)
    users       (unique index on email)
"""

from typing import Annotated

from pydantic import BeforeValidator

# ObjectId → str on the way out of the driver
PyObjectId = Annotated[str, BeforeValidator(str)]
