# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import ValidationError

# Local application imports
from ...application.dto.cat_dto import CatCreateRequest, CatResponse
from ...application.dto.common_dto import MessageResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.cat.create_cat import CreateCatUseCase
from ...application.use_cases.cat.list_cats import ListCatsUseCase
from ...application.use_cases.cat.get_cat import GetCatUseCase
from ...application.use_cases.cat.delete_cat import DeleteCatUseCase
from ...domain.exceptions import InvalidInputError, StreetCatsError
from ...infrastructure.storage.local_image_storage import LocalImageStorage
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import internal_error, to_http_exception


router = APIRouter(tags=["cats"])


def _validation_message(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item.get("loc", ()))
        parts.append(f"{field}: {item.get('msg')}" if field else str(item.get("msg")))
    return "; ".join(parts)


@router.get("", response_model=List[CatResponse])
async def list_cats() -> List[CatResponse]:
    """
    List all cat sightings, newest first

    Returns:
        List of CatResponse objects
    """
    container = get_container()
    list_cats_use_case = container.get(ListCatsUseCase)

    try:
        return await list_cats_use_case.execute()
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error listing cats")


@router.post("", response_model=CatResponse, status_code=status.HTTP_201_CREATED)
async def create_cat(
    name: str = Form(""),
    description: str = Form(""),
    lat: str = Form(""),
    lng: str = Form(""),
    image: Optional[UploadFile] = File(None),
    current_user: UserResponse = Depends(get_current_user),
) -> CatResponse:
    """
    Post a new cat sighting with a photo

    Args:
        name, description, lat, lng: Multipart form fields
        image: Uploaded photo (image/* content type)
        current_user: Current authenticated user (from dependency)

    Returns:
        CatResponse with the created cat
    """
    container = get_container()
    image_storage = container.get(LocalImageStorage)
    create_cat_use_case = container.get(CreateCatUseCase)

    try:
        try:
            request = CatCreateRequest(name=name, description=description, lat=lat, lng=lng)
        except ValidationError as validation_error:
            raise InvalidInputError(_validation_message(validation_error))

        image_filename = await image_storage.save(image)
        try:
            return await create_cat_use_case.execute(
                request=request,
                image_filename=image_filename,
                author=current_user,
            )
        except Exception:
            image_storage.delete(image_filename)
            raise
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error creating cat")


@router.get("/{cat_id}", response_model=CatResponse)
async def get_cat(cat_id: str) -> CatResponse:
    """
    Get a cat by ID

    Args:
        cat_id: ID of the cat

    Returns:
        CatResponse with cat information
    """
    container = get_container()
    get_cat_use_case = container.get(GetCatUseCase)

    try:
        return await get_cat_use_case.execute(cat_id)
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error getting cat")


@router.delete("/{cat_id}", response_model=MessageResponse)
async def delete_cat(
    cat_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    """
    Delete a cat (author only)

    Args:
        cat_id: ID of the cat
        current_user: Current authenticated user (from dependency)

    Returns:
        MessageResponse confirming the deletion
    """
    container = get_container()
    delete_cat_use_case = container.get(DeleteCatUseCase)

    try:
        await delete_cat_use_case.execute(cat_id=cat_id, current_user=current_user)
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error deleting cat")

    return MessageResponse(message="Cat deleted")
