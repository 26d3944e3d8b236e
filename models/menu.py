from typing import Any, Dict
from pydantic import BaseModel, Field

# BSON stores integers as signed 64-bit
MIN_WEIGHT = -2**63
MAX_WEIGHT = 2**63 - 1


class NewMenuLink(BaseModel):
    """Values for a menu link that has not been stored yet."""
    weight: int = Field(ge=MIN_WEIGHT, le=MAX_WEIGHT, description="Display order, ascending")
    path: str = Field(description="Target URL for navigation")
    name: str = Field(description="Display label")

    def to_document(self) -> Dict[str, Any]:
        return {"weight": self.weight, "path": self.path, "name": self.name}


class MenuLink(NewMenuLink):
    """Navigation entry as stored in the menuLinks collection."""
    id: str = Field(description="Store-generated identifier")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "MenuLink":
        return cls(
            id=str(document["_id"]),
            weight=document["weight"],
            path=document["path"],
            name=document["name"],
        )
