from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, HttpUrl, TypeAdapter
from pydantic.alias_generators import to_camel

_http_url = TypeAdapter(HttpUrl)


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _check_url(value):
    if value is None:
        return value
    try:
        _http_url.validate_python(value)
    except ValueError:
        raise ValueError("Input should be a valid http(s) URL") from None
    return value


# Empty strings from cleared form inputs mean "unset".
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
OptionalUrl = Annotated[Optional[str], BeforeValidator(_blank_to_none), AfterValidator(_check_url)]
