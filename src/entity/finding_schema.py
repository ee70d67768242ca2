from typing import Literal

from pydantic import BaseModel, ConfigDict, RootModel

Severity = Literal["Critical", "High", "Medium", "Low", "Informational", "Unknown"]

Kind = Literal[
    "Design",
    "Implementation",
    "Configuration",
    "Cryptography",
    "Access Control",
    "Authentication",
    "Authorization",
    "Input Validation",
    "Dependency",
    "Network",
    "Operational",
    "Documentation",
    "Process",
]


class Finding(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    title: str
    severity: Severity
    component: str
    description: str
    impact: str
    kind: Kind


class FindingList(RootModel[list[Finding]]):
    pass
