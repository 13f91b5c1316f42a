from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _normalize_email(email: Optional[str]) -> Optional[str]:
    """Normalize email to lowercase."""
    return email.lower() if email else None


NormalizedEmail = Annotated[EmailStr, AfterValidator(_normalize_email)]

# Lower-cased but not format-checked, for lookups where a malformed address
# should simply match nothing
LowercaseStr = Annotated[str, AfterValidator(str.lower)]
