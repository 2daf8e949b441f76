from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Curved monitor 49 inch", 399.0),
    ("Mechanical keyboard", 89.9),
    ("Wireless mouse", 25.5),
    ("USB-C dock", 120.0),
    ("Noise cancelling headphones", 199.99),
]


class Command(BaseCommand):
    help = "Seed the product catalog with sample data (only when it is empty)."

    def handle(self, *args, **options):
        service = ProductService(repository=ProductDjangoRepository())

        if service.list_products():
            self.stdout.write("Catalog already has products; nothing to seed.")
            return

        for name, price in SEED_PRODUCTS:
            service.create_product(CreateProductDTO(name=name, price=price))

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={len(SEED_PRODUCTS)}")
        )
