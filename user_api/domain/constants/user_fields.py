"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents"""
    ID = "id"
    FULL_NAME = "fullName"
    EMAIL = "email"
    PASSWORD = "password"
    IMAGE_PATH = "imagePath"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    EMAIL_UNIQUE_INDEX = "email_unique"
