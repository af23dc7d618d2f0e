"""
Product controller.

Updates re-validate the full product body, so PUT must carry every required
field. `createdDate` / `updatedDate` are written on insert only.
"""

from product_api.models import product
from product_api.models.product import Product
from product_api.schemas.product import ProductCreate
from product_api.services.base import DocumentService


class ProductService(DocumentService[Product]):
    collection_name = product.COLLECTION
    label = product.LABEL
    document_model = Product
    create_schema = ProductCreate
    update_schema = ProductCreate
    build_document = staticmethod(product.new_document)
