from tortoise import fields
from ...common.models import TimestampMixin


class Agent(TimestampMixin):
    id = fields.IntField(primary_key=True)
    call_sign = fields.CharField(max_length=50, unique=True, db_index=True)
    given_name = fields.CharField(max_length=100)
    family_name = fields.CharField(max_length=100)

    location_reports: fields.ReverseRelation["LocationReport"]

    def __str__(self):
        return f"Agent {self.call_sign} ({self.given_name} {self.family_name})"

    class Meta:
        table = "agents"
