"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from tripboard.api.routes import people, gallery

api_router = APIRouter()

# Include all route modules
api_router.include_router(people.router)
api_router.include_router(gallery.router)
