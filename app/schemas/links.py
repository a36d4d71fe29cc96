from pydantic import BaseModel, ConfigDict


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    rel: str
    method: str
