# users_service/models/address.py
from tortoise import fields, models


class Address(models.Model):
    id = fields.IntField(primary_key=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="addresses",
        on_delete=fields.CASCADE,
    )  # Owning user; addresses never outlive their user

    street = fields.CharField(max_length=256)
    city = fields.CharField(max_length=128)
    postal_code = fields.CharField(max_length=6)  # "DD-DDD"
    country = fields.CharField(max_length=128)

    class Meta:
        table = "addresses"
