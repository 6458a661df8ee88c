"""Product URL configuration.

The repository and service are built once, when the URLconf is loaded,
and injected into every view instance.  Routes have no trailing slash
and only match integer ids.
"""

from __future__ import annotations

from django.urls import path

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.products.views import DETAIL_METHODS, ProductViewSet

product_service = ProductService(repository=ProductDjangoRepository())

product_list = ProductViewSet.as_view(
    {"get": "list", "post": "create"},
    service=product_service,
)
product_detail = ProductViewSet.as_view(
    {
        "get": "retrieve",
        "head": "retrieve_headers",
        "put": "update",
        "patch": "partial_update",
        "delete": "destroy",
    },
    service=product_service,
    advertised_methods=DETAIL_METHODS,
)

urlpatterns = [
    path("products", product_list, name="product-list"),
    path("products/<int:pk>", product_detail, name="product-detail"),
]
