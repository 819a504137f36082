from fastapi import APIRouter
from brewery_api.api.v1.routers import beers, customers, health

# This is the main router for the v1 API
api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])
# singular resource paths: /api/v1/customer, /api/v1/beer
api_router.include_router(customers.router, prefix="/customer", tags=["Customers"])
api_router.include_router(beers.router, prefix="/beer", tags=["Beers"])
