"""C3 Work Item Routes - work item lifecycle endpoints."""
from workboard.c3_work_item_routes.work_item_routes import create_work_item_router
__all__ = ["create_work_item_router"]
