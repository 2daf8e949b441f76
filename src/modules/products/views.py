"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every
action first runs its validation pipeline, then calls exactly one
service method.  Domain exceptions are caught and translated into HTTP
status codes; anything else propagates to the API exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import InvalidProductInput, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validation import (
    CREATE_PRODUCT_PIPELINE,
    PRODUCT_ID_PIPELINE,
    UPDATE_PRODUCT_PIPELINE,
)

NOT_FOUND_MESSAGE = "Product not found"
DELETED_MESSAGE = "Product deleted"


def _validation_error(exc: InvalidProductInput) -> Response:
    return Response(
        {"errors": [failure.as_dict() for failure in exc.failures]},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _not_found() -> Response:
    return Response({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations plus the availability toggle.

    Uses ``ProductService`` with the repository built by
    ``repository_class`` (``ProductDjangoRepository`` by default).  A new
    service and repository are created for every request.
    """

    serializer_class = ProductSerializer
    lookup_value_regex = "[^/]+"
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            PRODUCT_ID_PIPELINE.enforce({"id": pk})
        except InvalidProductInput as exc:
            return _validation_error(exc)

        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Toggle / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data

        try:
            CREATE_PRODUCT_PIPELINE.enforce(body=data)
        except InvalidProductInput as exc:
            return _validation_error(exc)

        product = self._service.create_product(CreateProductDTO.from_payload(data))
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        data = request.data

        try:
            UPDATE_PRODUCT_PIPELINE.enforce({"id": pk}, data)
        except InvalidProductInput as exc:
            return _validation_error(exc)

        try:
            product = self._service.update_product(
                int(pk), UpdateProductDTO.from_payload(data)
            )
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}

        Takes no body: flips the product's availability.
        """
        try:
            PRODUCT_ID_PIPELINE.enforce({"id": pk})
        except InvalidProductInput as exc:
            return _validation_error(exc)

        try:
            product = self._service.toggle_availability(int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            PRODUCT_ID_PIPELINE.enforce({"id": pk})
        except InvalidProductInput as exc:
            return _validation_error(exc)

        try:
            self._service.delete_product(int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": DELETED_MESSAGE})
