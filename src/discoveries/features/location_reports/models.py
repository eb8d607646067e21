from tortoise import fields, models


class LocationReport(models.Model):  # Immutable once written, so no TimestampMixin
    id = fields.IntField(primary_key=True)

    agent: fields.ForeignKeyRelation["Agent"] = fields.ForeignKeyField(
        "models.Agent", related_name="location_reports", on_delete=fields.CASCADE
    )
    location: fields.ForeignKeyRelation["Location"] = fields.ForeignKeyField(
        "models.Location", related_name="location_reports", on_delete=fields.RESTRICT
    )

    status = fields.IntField(description="0-100 inclusive")
    report_time = fields.DatetimeField(db_index=True, description="UTC, set by the server")
    report_body = fields.TextField()
    title = fields.CharField(max_length=255, null=True)

    def __str__(self):
        return f"Location report {self.id} for location {self.location_id} at {self.report_time}"

    class Meta:
        table = "location_reports"
        ordering = ["report_time"]
