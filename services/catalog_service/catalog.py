from catalog_service.models import Product

PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=999.99),
    Product(id=2, name="Smartphone", price=599.99),
    Product(id=3, name="Tablet", price=399.99),
    Product(id=4, name="Headphones", price=149.99),
    Product(id=5, name="Smart Watch", price=299.99),
    Product(id=6, name="USB-C Cable", price=9.99),
)


def list_products() -> list[dict]:
    return [p.model_dump() for p in PRODUCTS]
