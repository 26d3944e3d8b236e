from pydantic import BaseModel, Field
from models.menu import MAX_WEIGHT, MIN_WEIGHT, NewMenuLink


class CreateMenuLinkForm(BaseModel):
    """Fields posted by the add-link form."""
    weight: int = Field(..., ge=MIN_WEIGHT, le=MAX_WEIGHT, description="Display order, parsed from text")
    path: str = Field(..., description="Target URL for navigation")
    name: str = Field(..., description="Display label")

    def to_new_link(self) -> NewMenuLink:
        return NewMenuLink(weight=self.weight, path=self.path, name=self.name)
