# freshwms/domains/ven/schemas.py

from freshwms.core.field_schema import EntitySchema, int_field, str_field

SELLER_SCHEMA = EntitySchema(
    entity="seller",
    field_specs={
        "cid": int_field(business_key=True),
        "company_name": str_field(),
        "address": str_field(),
        "telephone": str_field(max_length=20),
        "locality_id": int_field(),
    },
)
