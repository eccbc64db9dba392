from marshmallow import fields, validate, validates, ValidationError
from fittrack.schemas.base import RequestSchema
from fittrack.utils.dates import utc_today
from fittrack.utils.enums import MealCategory


def _not_in_future(value):
    if value is not None and value > utc_today():
        raise ValidationError("Date cannot be in the future")


class MealLogSchema(RequestSchema):
    food_id = fields.UUID(required=True)
    servings = fields.Float(load_default=1.0, validate=validate.Range(min=0.1))
    category = fields.Str(required=True, validate=validate.OneOf([e.value for e in MealCategory]))
    logged_at = fields.DateTime(allow_none=True, load_default=None)


class WeightLogSchema(RequestSchema):
    weight = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    date = fields.Date(allow_none=True, load_default=None)

    @validates("date")
    def validate_date(self, value, **kwargs):
        _not_in_future(value)


class MeasurementSchema(RequestSchema):
    date = fields.Date(allow_none=True, load_default=None)
    waist = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))
    chest = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))
    arms = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))
    hips = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))
    thighs = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))

    @validates("date")
    def validate_date(self, value, **kwargs):
        _not_in_future(value)
