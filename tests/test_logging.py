import logging

import pytest

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


def _messages(caplog):
    return [record.getMessage() for record in caplog.records]


@pytest.fixture()
def service():
    return ProductService(repository=ProductDjangoRepository())


class TestDomainEventLogging:
    def test_create_logs_product_created(self, service, caplog):
        with caplog.at_level(logging.INFO):
            product = service.create_product(CreateProductDTO(name="Mouse", price=50))
        created = [m for m in _messages(caplog) if "product.created" in m]
        assert created
        assert str(product.id) in created[0]

    def test_toggle_logs_new_availability(self, service, caplog):
        product = service.create_product(CreateProductDTO(name="Mouse", price=50))
        with caplog.at_level(logging.INFO):
            service.toggle_availability(product.id)
        toggled = [m for m in _messages(caplog) if "product.availability_toggled" in m]
        assert toggled
        assert "False" in toggled[0]

    def test_not_found_is_logged(self, service, caplog):
        with caplog.at_level(logging.INFO):
            with pytest.raises(ProductNotFound):
                service.get_product(4242)
        assert any("product.not_found" in m for m in _messages(caplog))

    def test_request_logs_carry_correlation_id(self, client, caplog):
        custom_id = "log-test-correlation-789"
        with caplog.at_level(logging.INFO):
            client.post(
                "/api/products",
                {"name": "Mouse", "price": 50},
                content_type="application/json",
                HTTP_X_REQUEST_ID=custom_id,
            )
        created = [m for m in _messages(caplog) if "product.created" in m]
        assert created
        assert custom_id in created[0]

    def test_create_emits_a_single_product_event(self, service, caplog):
        with caplog.at_level(logging.INFO):
            service.create_product(CreateProductDTO(name="Mouse", price=50))
        events = [m for m in _messages(caplog) if "'event': 'product" in m]
        assert len(events) == 1
        assert "product.created" in events[0]
