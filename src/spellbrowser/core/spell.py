"""Pydantic models for spell catalog records."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class CatalogModel(BaseModel):
    """Base for immutable catalog models (accepts camelCase or snake_case keys)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ClassLevel(CatalogModel):
    """Level at which one class can cast a spell."""

    class_name: str = Field(alias="className")
    level: int = Field(ge=0)


class Paragraph(CatalogModel):
    """Plain text paragraph in a spell description."""

    kind: Literal["paragraph"] = "paragraph"
    text: str


class Table(CatalogModel):
    """Table block in a spell description."""

    kind: Literal["table"] = "table"
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()


DescriptionBlock = Annotated[Union[Paragraph, Table], Field(discriminator="kind")]


def tag_description_block(block: Any) -> Any:
    """Attach a `kind` tag to a raw catalog description entry.

    Catalog files store paragraphs as bare strings and tables as
    objects with `headers` and `rows`.
    """
    if isinstance(block, str):
        return {"kind": "paragraph", "text": block}
    if isinstance(block, dict) and "kind" not in block:
        if "headers" in block and "rows" in block:
            return {"kind": "table", **block}
    return block


class SpellRecord(CatalogModel):
    """A single spell entry from the catalog."""

    name: str
    school: str
    source: str
    reversible: bool = False
    components: tuple[str, ...] = ()
    casting_time: str = Field(default="", alias="castingTime")
    range: str = ""
    duration: str = ""
    area_of_effect: str = Field(default="", alias="areaOfEffect")
    saving_throw: str = Field(default="", alias="savingThrow")
    description: tuple[DescriptionBlock, ...] = ()
    class_levels: tuple[ClassLevel, ...] = Field(alias="classLevels", min_length=1)

    @field_validator("description", mode="before")
    @classmethod
    def _tag_blocks(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [tag_description_block(block) for block in value]
        return value

    @field_serializer("description")
    def _untag_blocks(self, blocks: tuple[DescriptionBlock, ...]) -> list:
        """Write blocks back in catalog form: bare strings and untagged tables."""
        return [
            block.text if isinstance(block, Paragraph)
            else {"headers": list(block.headers), "rows": [list(row) for row in block.rows]}
            for block in blocks
        ]

    @property
    def source_id(self) -> str:
        """Rulebook name: the part of `source` before the first dash."""
        return self.source.split("-")[0].strip()

    @property
    def source_page(self) -> str | None:
        """Page reference after the dash, if any."""
        parts = self.source.split("-")
        if len(parts) < 2:
            return None
        return parts[1].strip()

    @property
    def first_level(self) -> int:
        """Level of the first classLevels entry (catalog order)."""
        return self.class_levels[0].level

    def level_for(self, class_name: str | None) -> int:
        """Level for the given class, or 0 if the class can't cast it."""
        for entry in self.class_levels:
            if entry.class_name == class_name:
                return entry.level
        return 0

    def has_class(self, class_name: str) -> bool:
        return any(entry.class_name == class_name for entry in self.class_levels)

    def __repr__(self) -> str:
        return f"SpellRecord(name={self.name!r}, source={self.source!r}, level={self.first_level})"
