"""Application service: List Products use case (query).

Filters the catalog and, when a customer is given, shows the markdown
price that customer would pay.
"""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.customer import Customer
from storefront.domain.model.discount import DiscountRule
from storefront.domain.model.product import Product
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.pricing_engine import PricingEngine


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
        customer_repo: CustomerRepository,
        pricing_engine: PricingEngine | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._discount_repo = discount_repo
        self._customer_repo = customer_repo
        self._pricing = pricing_engine or PricingEngine()

    def handle(
        self,
        customer_id: str | None = None,
        category: str | None = None,
        brand: str | None = None,
        search: str | None = None,
    ) -> list[ProductDTO]:
        customer = self._load_customer(customer_id)
        discounts = self._discount_repo.list_all()

        products = self._product_repo.list_all()
        if category:
            products = [p for p in products if p.category.lower() == category.lower()]
        if brand:
            products = [p for p in products if p.brand.lower() == brand.lower()]
        if search:
            term = search.lower()
            products = [
                p for p in products
                if term in p.name.lower() or term in p.code.lower() or term in p.brand.lower()
            ]

        return [self._to_dto(p, customer, discounts) for p in products]

    def _load_customer(self, customer_id: str | None) -> Customer | None:
        if customer_id is None:
            return None
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")
        return customer

    def _to_dto(
        self,
        product: Product,
        customer: Customer | None,
        discounts: list[DiscountRule],
    ) -> ProductDTO:
        rule = None
        if customer is not None:
            rule = self._pricing.best_automatic_rule(product.id, discounts, customer)

        sale_price = None
        if rule is not None:
            sale_price = str(product.price.minus_clamped(product.price.percentage(rule.percentage)))

        return ProductDTO(
            id=product.id,
            code=product.code,
            name=product.name,
            brand=product.brand,
            category=product.category,
            price=str(product.price),
            stock=product.stock,
            markdown_percentage=rule.percentage if rule else None,
            sale_price=sale_price,
        )
