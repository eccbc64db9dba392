from marshmallow import fields, validate, pre_load
from fittrack.schemas.base import RequestSchema
from fittrack.utils.enums import GoalType

MIN_CALORIE_TARGET = 1000
MAX_CALORIE_TARGET = 5000

class ProfileUpdateSchema(RequestSchema):
    name = fields.Str(validate=validate.Length(min=1))
    goal_type = fields.Str(validate=validate.OneOf([e.value for e in GoalType]))
    daily_calorie_target = fields.Int(
        validate=validate.Range(min=MIN_CALORIE_TARGET, max=MAX_CALORIE_TARGET)
    )

    @pre_load
    def strip_name(self, data, **kwargs):
        if isinstance(data.get("name"), str):
            data = dict(data, name=data["name"].strip())
        return data
