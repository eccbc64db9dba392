from marshmallow import fields, validate
from fittrack.schemas.base import RequestSchema

class FoodItemSchema(RequestSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1))
    calories = fields.Float(load_default=0, validate=validate.Range(min=0))
    protein = fields.Float(load_default=0, validate=validate.Range(min=0))
    carbs = fields.Float(load_default=0, validate=validate.Range(min=0))
    fats = fields.Float(load_default=0, validate=validate.Range(min=0))
    barcode = fields.Str(allow_none=True, load_default=None)
