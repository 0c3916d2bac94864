from typing import Annotated
from pydantic import BaseModel, Field

EmployeeId = Annotated[str, Field(pattern=r"^E\d+$")]


class Employee(BaseModel):
    id: EmployeeId
    name: str = Field(..., min_length=1, max_length=255)
