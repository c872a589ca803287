# catalog_service/main.py

"""
FastAPI Product Service API.
Exposes the catalog's create, retrieval, update and deletion operations over
HTTP. Requests are decoded into candidates, handed to the CatalogService, and
its outcomes are mapped to status codes and error bodies here.
"""
import logging
import sys
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Annotated, List

from fastapi import Depends, FastAPI, Path, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import API_PREFIX, CORS_ALLOW_ORIGINS, LOG_LEVEL, SERVICE_NAME
from .models import NotFoundFailure, Outcome, ValidationFailure
from .schemas import ErrorResponse, ProductCreate, ProductResponse, ProductUpdate
from .service import CatalogService
from .store import ProductStore

# -----------------------------
# Configure Logging
# -----------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)


# -----------------------------
# Catalog wiring
# -----------------------------
# One store per process; its records live as long as the process does.
_catalog = CatalogService(ProductStore())


def get_catalog() -> CatalogService:
    """
    Dependency to provide the process-wide CatalogService to endpoints.
    Tests override it to get an isolated store.
    """
    return _catalog


# Product ids are 64-bit signed integers; anything outside that range is rejected.
ProductId = Annotated[
    int,
    Path(ge=-(2**63), le=2**63 - 1, description="Unique identifier of the product."),
]


# -----------------------------
# FastAPI App Initialization
# -----------------------------
app = FastAPI(
    title="Product Service API",
    description="Manages the product catalog for mini-ecommerce app",
    version="1.0.0",
)

# Enable CORS (for frontend dev/testing)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- FastAPI Event Handlers ---
@app.on_event("startup")
async def startup_event():
    """
    Handles application startup events.
    The catalog is in memory, so there is nothing to connect to.
    """
    logger.info(
        f"{SERVICE_NAME} started with in-memory catalog, serving products at {API_PREFIX}"
    )


# -----------------------------
# Outcome mapping
# -----------------------------
def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _failure_response(request: Request, outcome: Outcome) -> JSONResponse:
    if isinstance(outcome, ValidationFailure):
        logger.warning(f"Rejected product on {request.url.path}: {outcome.reason}")
        return _error_response(request, status.HTTP_400_BAD_REQUEST, outcome.reason)
    if isinstance(outcome, NotFoundFailure):
        logger.warning(f"Product with ID: {outcome.product_id} not found.")
        return _error_response(request, status.HTTP_404_NOT_FOUND, outcome.message)
    raise TypeError(f"Unexpected failure outcome: {outcome!r}")


# --- Root Endpoint ---
@app.get("/", status_code=status.HTTP_200_OK, summary="Root endpoint")
async def read_root():
    """
    Returns a welcome message for the Product Service.
    """
    return {"message": "Welcome to the Product Service!"}


# --- Health Check Endpoint ---
@app.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
def health_check(catalog: CatalogService = Depends(get_catalog)):
    """
    A simple health check endpoint to verify the service is running.
    Also reports how many products the catalog currently holds.
    """
    return {"status": "ok", "service": SERVICE_NAME, "products": len(catalog.store)}


# -----------------------------
# CRUD Endpoints
# -----------------------------


@app.post(
    API_PREFIX,
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a new product",
)
def create_product(
    product: ProductCreate,
    request: Request,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Creates a new product in the catalog.

    - Validates name, description, price, quantity and category, reporting the first problem found.
    - Returns the created product, including its assigned `id`.
    """
    logger.info(f"Creating product: {product.name}")
    outcome = catalog.create(product.to_candidate())
    if not outcome.ok:
        return _failure_response(request, outcome)
    created = outcome.value
    logger.info(f"Product '{created.name}' (ID: {created.id}) created successfully.")
    return ProductResponse.model_validate(created)


@app.get(
    API_PREFIX,
    response_model=List[ProductResponse],
    summary="List all products",
)
def list_products(catalog: CatalogService = Depends(get_catalog)):
    """
    Retrieves every product in the catalog, in the order they were created.
    """
    products = catalog.list_all().value
    logger.info(f"Retrieved {len(products)} products.")
    return [ProductResponse.model_validate(product) for product in products]


@app.get(
    API_PREFIX + "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Retrieve a product by ID",
)
def get_product(
    product_id: ProductId,
    request: Request,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Retrieves details of a single product by its unique ID.

    - Returns 404 if the product does not exist.
    """
    logger.info(f"Fetching product with ID: {product_id}")
    outcome = catalog.get(product_id)
    if not outcome.ok:
        return _failure_response(request, outcome)
    return ProductResponse.model_validate(outcome.value)


@app.put(
    API_PREFIX + "/{product_id}",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update an existing product",
)
def update_product(
    product_id: ProductId,
    updated: ProductUpdate,
    request: Request,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Replaces every field of an existing product.

    - Validation runs first, so an invalid body is rejected with 400 even for unknown IDs.
    - Returns 404 if the product does not exist.
    """
    logger.info(f"Updating product with ID: {product_id}")
    outcome = catalog.update(product_id, updated.to_candidate())
    if not outcome.ok:
        return _failure_response(request, outcome)
    logger.info(f"Product '{outcome.value.name}' (ID: {product_id}) updated successfully.")
    return ProductResponse.model_validate(outcome.value)


@app.delete(
    API_PREFIX + "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a product by ID",
)
def delete_product(
    product_id: ProductId,
    request: Request,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Deletes a product from the catalog by its unique ID.

    - Returns a 204 No Content status code upon successful deletion.
    - Returns 404 if the product does not exist.
    """
    logger.info(f"Attempting to delete product with ID: {product_id}")
    outcome = catalog.delete(product_id)
    if not outcome.ok:
        return _failure_response(request, outcome)
    logger.info(f"Product (ID: {product_id}) deleted successfully.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
