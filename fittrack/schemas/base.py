from marshmallow import Schema, EXCLUDE

class RequestSchema(Schema):
    """Request bodies silently drop fields the server owns, such as ``user_id``."""

    class Meta:
        unknown = EXCLUDE
