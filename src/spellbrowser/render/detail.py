"""Build the display data for a spell's detail popup."""

from pydantic import BaseModel

from spellbrowser.core import DescriptionBlock, SpellRecord, Table

REVERSIBLE_MARKER = "*"
REVERSIBLE_NOTE = "* Reversible Spell"
COMPONENT_DELIMITER = ", "


class SpellDetail(BaseModel):
    """Everything the detail popup shows for one spell."""

    name: str
    title: str
    reversible_note: str | None = None
    level: int
    school: str
    components: str
    casting_time: str
    range: str
    duration: str
    area_of_effect: str
    blocks: list[DescriptionBlock]
    footer: str | None = None


def display_name(spell: SpellRecord) -> str:
    """Spell name with the reversible marker appended when applicable."""
    return spell.name + (REVERSIBLE_MARKER if spell.reversible else "")


def pad_table(table: Table) -> Table:
    """Trim cells and pad short rows on the right up to the header count."""
    width = len(table.headers)
    rows = []
    for row in table.rows:
        cells = [cell.strip() for cell in row]
        if len(cells) < width:
            cells.extend([""] * (width - len(cells)))
        rows.append(tuple(cells))
    return Table(headers=table.headers, rows=tuple(rows))


def render_block(block: DescriptionBlock) -> DescriptionBlock:
    if isinstance(block, Table):
        return pad_table(block)
    return block


def build_spell_detail(spell: SpellRecord) -> SpellDetail:
    """Assemble the detail view for a spell.

    The level shown is the first classLevels entry, independent of the
    class currently selected.
    """
    return SpellDetail(
        name=spell.name,
        title=display_name(spell),
        reversible_note=REVERSIBLE_NOTE if spell.reversible else None,
        level=spell.first_level,
        school=spell.school,
        components=COMPONENT_DELIMITER.join(spell.components),
        casting_time=spell.casting_time,
        range=spell.range,
        duration=spell.duration,
        area_of_effect=spell.area_of_effect,
        blocks=[render_block(block) for block in spell.description],
        footer=spell.source or None,
    )
