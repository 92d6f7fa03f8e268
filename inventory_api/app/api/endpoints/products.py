"""
Product endpoints.

Every route here requires a valid bearer token.  Add and update take
the full record (``sku``, ``name``, ``qty``, ``price``, ``unit``,
``status``); delete and search take only ``sku``.  Bodies may be
form‑encoded or JSON.
"""

from fastapi import APIRouter, Depends, Response, status

from ...schemas import ErrorRead
from ...schemas.product import Product, ProductList, ProductSKU
from ...services.product_service import ProductService
from ..deps import get_product_service, parse_body, require_token

router = APIRouter(
    dependencies=[Depends(require_token)],
    responses={401: {"model": ErrorRead}},
)


@router.get("/items", response_model=ProductList)
async def list_products(products: ProductService = Depends(get_product_service)) -> ProductList:
    """Return all products; order is not guaranteed."""
    return ProductList(data=await products.list_products())


@router.post(
    "/item/add",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={400: {"model": ErrorRead}},
)
async def add_product(
    product: Product = Depends(parse_body(Product)),
    products: ProductService = Depends(get_product_service),
) -> Response:
    await products.add_product(product)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/item/update", response_class=Response, responses={404: {"model": ErrorRead}})
async def update_product(
    product: Product = Depends(parse_body(Product)),
    products: ProductService = Depends(get_product_service),
) -> Response:
    """Replace all fields of the product with this SKU."""
    await products.update_product(product)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/item/delete", response_class=Response, responses={404: {"model": ErrorRead}})
async def delete_product(
    body: ProductSKU = Depends(parse_body(ProductSKU)),
    products: ProductService = Depends(get_product_service),
) -> Response:
    await products.delete_product(body.sku)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/item/search", response_model=Product, responses={404: {"model": ErrorRead}})
async def search_product(
    body: ProductSKU = Depends(parse_body(ProductSKU)),
    products: ProductService = Depends(get_product_service),
) -> Product:
    """Look up one product by exact SKU."""
    return await products.search_product(body.sku)
