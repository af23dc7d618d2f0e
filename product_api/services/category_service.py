"""
Category controller.

Updates are partial: any subset of categoryId / name / description (plus
pass-through extras) may be sent.
"""

from product_api.models import category
from product_api.models.category import Category
from product_api.schemas.category import CategoryCreate, CategoryUpdate
from product_api.services.base import DocumentService


class CategoryService(DocumentService[Category]):
    collection_name = category.COLLECTION
    label = category.LABEL
    document_model = Category
    create_schema = CategoryCreate
    update_schema = CategoryUpdate
    build_document = staticmethod(category.new_document)
