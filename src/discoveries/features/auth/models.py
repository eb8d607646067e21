from tortoise import fields
from ...common.models import TimestampMixin

class User(TimestampMixin):
    id = fields.IntField(primary_key=True)
    username = fields.CharField(max_length=100, unique=True, db_index=True)
    hashed_password = fields.CharField(max_length=255)
    role = fields.CharField(max_length=50, default="agent")  # "agent" or "admin"
    is_active = fields.BooleanField(default=True)

    agent: fields.ForeignKeyNullableRelation["Agent"] = fields.ForeignKeyField(
        "models.Agent", related_name="users", on_delete=fields.SET_NULL, null=True
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    class Meta:
        table = "users"
