from typing import Literal, Union
from pydantic import BaseModel
from tooltrack.schemas.assignment import AssignmentErrorCode


class CertificateSuccess(BaseModel):
    ok: Literal[True] = True
    document: bytes
    filename: str


class CertificateFailure(BaseModel):
    ok: Literal[False] = False
    error: str
    code: AssignmentErrorCode = AssignmentErrorCode.tool_not_found


CertificateResult = Union[CertificateSuccess, CertificateFailure]
