from typing import Literal


existing_resources = Literal["powerdns_zone"]


lifecycle_operations = Literal[
    "plan",
    "create",
    "read",
    "update",
    "delete",
    "exists",
    "import",
]
