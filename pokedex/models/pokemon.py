"""Pydantic models for PokeAPI catalog and detail data.

Raw models (``CatalogEntry``, ``CatalogPage``, ``DetailRecord``) are validated
in strict mode straight from the response body.  The wire-to-model key mapping
is declared on each field as a validation alias, so the snake_case and
hyphenated keys of the API never leak past this module.
"""

from typing import Optional

from pydantic import (
    AliasPath,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    computed_field,
    field_validator,
)

SPRITE_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{id}.png"
)

# Upper bound used when rendering base stats as bars
MAX_BASE_STAT = 255

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def id_from_url(url: str) -> int:
    """Extract the numeric id from a reference URL (``.../pokemon/25/`` -> 25).

    The last path segment made only of digits wins; a URL without one maps to 0.
    Segments too long for ``int`` to convert are skipped.
    """
    for part in reversed(url.split("/")):
        if not (part.isascii() and part.isdigit()):
            continue
        try:
            return int(part)
        except ValueError:
            continue
    return 0


def capitalize_first(name: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return name[:1].upper() + name[1:]


def is_valid_url(value: str) -> bool:
    """Return True for an absolute http(s) URL with a host."""
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return url.scheme in ("http", "https") and bool(url.host)


def resolve_image_url(primary: Optional[str], fallback: Optional[str]) -> Optional[str]:
    """Pick the display image: official artwork first, then the default sprite."""
    for candidate in (primary, fallback):
        if candidate is not None and is_valid_url(candidate):
            return candidate
    return None


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class CatalogEntry(BaseModel):
    """Raw entry of the ``GET /pokemon`` list."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    name: str = Field(..., description="Pokémon name as used by the API")
    reference_url: str = Field(
        ..., validation_alias="url", description="Detail URL ending in the numeric id"
    )


class CatalogPage(BaseModel):
    """Raw body of the ``GET /pokemon`` list."""

    model_config = ConfigDict(strict=True)

    results: list[CatalogEntry]


class CatalogItem(BaseModel):
    """List item for display. Two items are equal when their ids are equal."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Numeric id parsed from the reference URL")
    name: str = Field(..., description="Pokémon name")

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "CatalogItem":
        return cls(id=id_from_url(entry.reference_url), name=entry.name)

    @computed_field
    @property
    def display_name(self) -> str:
        return capitalize_first(self.name)

    @computed_field
    @property
    def display_number(self) -> str:
        return f"#{self.id:03d}"

    @computed_field
    @property
    def sprite_url(self) -> str:
        return SPRITE_URL_TEMPLATE.format(id=self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


# ---------------------------------------------------------------------------
# Detail
# ---------------------------------------------------------------------------

class TypeSlot(BaseModel):
    """One entry of a Pokémon's ``types`` list."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    slot: int = Field(..., description="1-based slot position")
    type_name: str = Field(..., validation_alias=AliasPath("type", "name"))


class StatEntry(BaseModel):
    """One entry of a Pokémon's ``stats`` list."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    base_value: int = Field(..., validation_alias="base_stat")
    effort: int = Field(..., description="Effort value yield")
    stat_name: str = Field(..., validation_alias=AliasPath("stat", "name"))

    @computed_field
    @property
    def fraction(self) -> float:
        """Base value as a share of ``MAX_BASE_STAT``, clamped to [0, 1]."""
        return min(max(self.base_value / MAX_BASE_STAT, 0.0), 1.0)


class DetailRecord(BaseModel):
    """Full Pokémon record from ``GET /pokemon/{identifier}``."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    id: int = Field(..., description="National dex number")
    name: str = Field(..., description="Pokémon name")
    height: int = Field(..., description="Height in decimetres")
    weight: int = Field(..., description="Weight in hectograms")
    base_experience: Optional[int] = Field(None, description="Absent for some records")
    types: list[TypeSlot] = Field(..., description="Types in slot order")
    stats: list[StatEntry] = Field(..., description="Base stats in source order")
    image_url_primary: Optional[str] = Field(
        None,
        validation_alias=AliasPath("sprites", "other", "official-artwork", "front_default"),
        description="Official artwork URL",
    )
    image_url_fallback: Optional[str] = Field(
        None,
        validation_alias=AliasPath("sprites", "front_default"),
        description="Default front sprite URL",
    )

    @field_validator("image_url_primary", "image_url_fallback")
    @classmethod
    def _drop_invalid_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not is_valid_url(value):
            return None
        return value

    @computed_field
    @property
    def display_name(self) -> str:
        return capitalize_first(self.name)

    @computed_field
    @property
    def display_number(self) -> str:
        return f"#{self.id:03d}"

    @computed_field
    @property
    def types_display(self) -> str:
        """Type names capitalised and comma separated (``Grass, Poison``)."""
        return ", ".join(slot.type_name.title() for slot in self.types)

    @computed_field
    @property
    def image_url(self) -> Optional[str]:
        return resolve_image_url(self.image_url_primary, self.image_url_fallback)
