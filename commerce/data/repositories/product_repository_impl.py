"""SQLAlchemy implementation of ProductRepository."""

from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.domain.entities import Product
from commerce.domain.repositories import ProductRepository

from ..mappers import ProductMapper
from ..models import ProductModel
from .base import SqlAlchemyRepository


logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(SqlAlchemyRepository[ProductModel], ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    entity_name = "Product"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ProductModel)

    async def create(self, product: Product) -> None:
        logger.info(f"Creating product: {product.id}")
        await self._ensure_absent(product.id)
        self._session.add(ProductMapper.to_persistence(product))
        await self._flush("create", product.id)

    async def update(self, product: Product) -> None:
        logger.info(f"Updating product: {product.id}")
        model = await self._get_or_raise(product.id)
        ProductMapper.update_persistence(product, model)
        await self._flush("update", product.id)

    async def find(self, product_id: str) -> Product:
        model = await self._get_or_raise(product_id)
        return ProductMapper.to_domain(model)

    async def find_all(self) -> List[Product]:
        result = await self._session.execute(select(ProductModel).order_by(ProductModel.id))
        products = [ProductMapper.to_domain(model) for model in result.scalars().all()]
        logger.info(f"Found {len(products)} products")
        return products
