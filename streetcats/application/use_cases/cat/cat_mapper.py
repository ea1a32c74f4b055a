# Local application imports
from ....domain.models.cat import Cat
from ...dto.cat_dto import CatResponse, LocationSchema
from ...dto.user_dto import AuthorSummary


UPLOADS_URL_PREFIX = "/uploads"


def cat_to_response(cat: Cat, author: AuthorSummary) -> CatResponse:
    """Convert a Cat domain model into its response DTO"""
    return CatResponse(
        id=cat.id or "",
        name=cat.name,
        description=cat.description,
        location=LocationSchema(lat=cat.location.lat, lng=cat.location.lng),
        image=cat.image,
        image_url=f"{UPLOADS_URL_PREFIX}/{cat.image}",
        author=author,
        date=cat.date,
    )
