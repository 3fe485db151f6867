"""C3 Board Routes - Kanban board, backlog and priority ordering."""
from workboard.c3_board_routes.board_routes import create_board_router
__all__ = ["create_board_router"]
