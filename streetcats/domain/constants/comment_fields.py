"""Constants for Comment model field names"""


class CommentFields:
    """Field name constants for Comment model"""
    ID = "id"
    TEXT = "text"
    CAT_ID = "cat_id"
    AUTHOR = "author"
    DATE = "date"

    # MongoDB specific
    MONGO_ID = "_id"
