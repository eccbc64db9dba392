from marshmallow import fields, validate, pre_load
from fittrack.schemas.base import RequestSchema

class RegisterSchema(RequestSchema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))
    name = fields.Str(load_default="")

    @pre_load
    def normalize_email(self, data, **kwargs):
        if isinstance(data.get("email"), str):
            data = dict(data, email=data["email"].strip().lower())
        return data


class LoginSchema(RequestSchema):
    email = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))

    @pre_load
    def normalize_email(self, data, **kwargs):
        if isinstance(data.get("email"), str):
            data = dict(data, email=data["email"].strip().lower())
        return data
