from .auth_controller import router as auth_router
from .cat_controller import router as cat_router
from .comment_controller import router as comment_router


__all__ = ["auth_router", "cat_router", "comment_router"]
