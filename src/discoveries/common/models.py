"""Common database models shared by every feature.

Holds the TimestampMixin that gives rows created_at and updated_at columns."""

from tortoise import fields, models


class TimestampMixin(models.Model):
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        abstract = True
