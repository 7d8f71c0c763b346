from typing import Annotated
from pydantic import StringConstraints

# Trimmed string that must not be empty after trimming
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
