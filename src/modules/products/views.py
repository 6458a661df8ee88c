"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  The service
is injected through ``as_view(..., service=...)`` (see ``urls.py``); the
view only picks the service call for the verb and renders its result.

Contract per verb:

==========  ===================  =======  ===========================
Verb        Path                 Success  Failure
==========  ===================  =======  ===========================
GET         /products            200      500
GET         /products/{id}       200      404, 500
HEAD        /products/{id}       200      404, 500
OPTIONS     /products            200      -
OPTIONS     /products/{id}       200      -
POST        /products            201      400, 500
PUT         /products/{id}       204      400, 404, 500
PATCH       /products/{id}       204      400, 404, 500
DELETE      /products/{id}       204      404, 500
==========  ===================  =======  ===========================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.http import HttpResponse
from rest_framework import status
from rest_framework.renderers import JSONRenderer
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.core.responses import failure_response
from modules.products.serializers import ProductSerializer
from shared.domain.results import NotFound

if TYPE_CHECKING:
    from modules.products.services import ProductService

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD")
DETAIL_METHODS = ("GET", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD")

EXISTS_HEADER = "X-Product-Exists"


class ProductViewSet(ViewSet):
    """ViewSet for the Product resource.

    Does **not** touch the ORM: every store access goes through the
    injected ``ProductService``.
    """

    service: ProductService | None = None
    advertised_methods = SUPPORTED_METHODS

    # ------------------------------------------------------------------
    # Safe methods
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        result = self.service.list_products()
        if not result.ok:
            return failure_response(result, "retrieving products")
        return Response(ProductSerializer(result.value, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /products/{pk}"""
        result = self.service.get_product(pk)
        if not result.ok:
            return failure_response(result, "retrieving the product")
        return Response(ProductSerializer(result.value).data)

    def retrieve_headers(self, request: Request, pk: int) -> HttpResponse:
        """HEAD /products/{pk}

        Same lookup as GET; the body is replaced by headers describing it.
        """
        result = self.service.get_product(pk)
        if not result.ok and not isinstance(result, NotFound):
            return failure_response(result, "retrieving the product")

        flag = JSONRenderer().render(result.ok)
        response = HttpResponse(
            status=status.HTTP_200_OK if result.ok else status.HTTP_404_NOT_FOUND,
            content_type="application/json",
        )
        response[EXISTS_HEADER] = flag.decode()
        if result.ok:
            response["Content-Length"] = str(len(flag))
        return response

    def options(self, request: Request, *args, **kwargs) -> Response:
        """OPTIONS /products and /products/{pk}

        Static metadata; the store is never consulted.  The collection route
        lists every verb of the resource, the detail route only its own.
        """
        self.headers["Allow"] = ", ".join(self.advertised_methods)
        return Response(status=status.HTTP_200_OK)

    # ------------------------------------------------------------------
    # Unsafe methods
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        result = self.service.create_product(request.data)
        if not result.ok:
            return failure_response(result, "creating product")

        product = result.value
        location = reverse("product-detail", kwargs={"pk": product.id}, request=request)
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: int) -> Response:
        """PUT /products/{pk}"""
        result = self.service.replace_product(pk, request.data)
        if not result.ok:
            return failure_response(result, "updating the product")
        return Response(status=status.HTTP_204_NO_CONTENT)

    def partial_update(self, request: Request, pk: int) -> Response:
        """PATCH /products/{pk}"""
        result = self.service.update_price(pk, request.data)
        if not result.ok:
            return failure_response(result, "updating the product price")
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /products/{pk}"""
        result = self.service.delete_product(pk)
        if not result.ok:
            return failure_response(result, "deleting the product")
        return Response(status=status.HTTP_204_NO_CONTENT)
