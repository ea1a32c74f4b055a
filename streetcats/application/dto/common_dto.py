from pydantic import BaseModel


class MessageResponse(BaseModel):
    """DTO for operations that only report an outcome"""
    message: str
