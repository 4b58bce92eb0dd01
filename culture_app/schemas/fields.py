from typing import Annotated

from pydantic import BeforeValidator


def _scalar_to_text(value):
    # numbers land in TEXT columns as their decimal text
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


TextField = Annotated[str | None, BeforeValidator(_scalar_to_text)]
