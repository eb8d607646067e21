from tortoise import fields
from ...common.models import TimestampMixin


class Location(TimestampMixin):
    id = fields.IntField(primary_key=True)
    site_name = fields.CharField(max_length=255)
    location = fields.CharField(max_length=255)
    time_zone = fields.CharField(max_length=64, description="IANA zone name, e.g. Europe/London")

    location_reports: fields.ReverseRelation["LocationReport"]

    def __str__(self):
        return f"{self.site_name}, {self.location} ({self.time_zone})"

    class Meta:
        table = "locations"
