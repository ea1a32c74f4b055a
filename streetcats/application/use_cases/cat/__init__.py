from .create_cat import CreateCatUseCase
from .list_cats import ListCatsUseCase
from .get_cat import GetCatUseCase
from .delete_cat import DeleteCatUseCase

__all__ = ["CreateCatUseCase", "ListCatsUseCase", "GetCatUseCase", "DeleteCatUseCase"]
