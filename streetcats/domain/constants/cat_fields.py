"""Constants for Cat model field names"""


class CatFields:
    """Field name constants for Cat model"""
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    LOCATION = "location"
    LAT = "lat"
    LNG = "lng"
    IMAGE = "image"
    AUTHOR = "author"
    DATE = "date"

    # MongoDB specific
    MONGO_ID = "_id"
