"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Validation errors and domain exceptions are translated into
HTTP status codes; anything else (notably an unresolved
``ProductConcurrencyConflict``) propagates to Django's generic
error handling.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductIdMismatch, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

_NOT_FOUND = OpenApiResponse(description="Product not found.")
_BAD_REQUEST = OpenApiResponse(description="Invalid payload or id mismatch.")


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    A new service and repository are built for every request.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    lookup_value_regex = r"[0-9]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses={200: ProductSerializer(many=True)})
    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 404: _NOT_FOUND})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound:
            return self._not_found()
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=ProductSerializer,
        responses={201: ProductSerializer, 400: _BAD_REQUEST},
    )
    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid_payload(exc)

        product = self._service.create_product(dto)

        location = reverse("product-detail", kwargs={"pk": product.id}, request=request)
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @extend_schema(
        request=ProductSerializer,
        responses={204: None, 400: _BAD_REQUEST, 404: _NOT_FOUND},
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /products/{pk}"""
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid_payload(exc)

        try:
            self._service.update_product(int(pk), dto)
        except ProductIdMismatch as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except ProductNotFound:
            return self._not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={204: None, 404: _NOT_FOUND})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound:
            return self._not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"detail": "Product not found."},
            status=status.HTTP_404_NOT_FOUND,
        )

    @staticmethod
    def _invalid_payload(exc: PydanticValidationError) -> Response:
        return Response(
            {
                "detail": "Invalid product payload.",
                "errors": exc.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
