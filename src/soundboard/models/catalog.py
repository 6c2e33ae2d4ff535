"""Static sound catalog."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .clip import Clip


class Category(BaseModel):
    """One category of clips, in display order."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Category key (also the asset sub-directory)")
    title: str = Field(description="Display title")
    color: str = Field(default="#2196F3", description="Accent color as hex")
    clips: tuple[str, ...] = Field(default=(), description="Clip names in display order")


class Catalog(BaseModel):
    """Immutable mapping from category to its ordered clip names."""

    model_config = ConfigDict(frozen=True)

    groups: tuple[Category, ...] = Field(default=(), description="Categories in display order")

    @classmethod
    def from_mapping(
        cls,
        mapping: dict[str, list[str]],
        titles: Optional[dict[str, str]] = None,
        colors: Optional[dict[str, str]] = None,
    ) -> "Catalog":
        """Build a catalog from ``{category: [clip names]}`` (insertion order kept)."""
        titles = titles or {}
        colors = colors or {}
        return cls(
            groups=tuple(
                Category(
                    key=key,
                    title=titles.get(key, key),
                    clips=tuple(names),
                    **({"color": colors[key]} if key in colors else {}),
                )
                for key, names in mapping.items()
            )
        )

    @property
    def categories(self) -> list[str]:
        """Category keys in display order."""
        return [c.key for c in self.groups]

    def category(self, key: str) -> Optional[Category]:
        for category in self.groups:
            if category.key == key:
                return category
        return None

    def get_category(self, key: str) -> tuple[str, ...]:
        """Clip names of a category in order (empty for unknown categories)."""
        category = self.category(key)
        return category.clips if category else ()

    def title_for(self, key: str) -> str:
        category = self.category(key)
        return category.title if category else key

    def color_for(self, key: str) -> Optional[str]:
        category = self.category(key)
        return category.color if category else None

    def clips(self, category: Optional[str] = None) -> list[Clip]:
        """Flattened clip identities, optionally restricted to one category."""
        keys = [category] if category is not None else self.categories
        return [Clip(category=key, name=name) for key in keys for name in self.get_category(key)]

    def contains(self, clip: Clip) -> bool:
        return clip.name in self.get_category(clip.category)

    def __len__(self) -> int:
        return sum(len(c.clips) for c in self.groups)


DEFAULT_CATALOG = Catalog.from_mapping(
    {
        "drawnTogether": [
            "AUA",
            "AlrightyThen",
            "ArschZucker",
            "Genickzwirbler",
            "Gottlos",
            "Hebräer",
            "IchBinGott",
            "IchKannFliegen",
            "JudeImGarten",
            "PostIstDa",
            "SaufenLaufen",
            "Telefon",
            "Walross",
            "WasIstDennHierLos",
            "WürdMirStinken",
        ],
        "spongeBob": [
            "BenjaminBluemchen",
            "BösesImBusch",
            "KoennteSchlimmerSein",
            "Miau",
            "Miau_Song",
            "NeinHierIstPatrick",
            "NurNahrungsmittel",
            "Schokolade",
            "SchwammAnStern",
            "SeiVorsichtig",
            "SquareDance",
            "Wambo",
        ],
        "Deutsche Memes": [
            "Alarm",
            "BlasMirDochEin",
            "DerGerät",
            "Glatteis",
            "Habicht",
            "Kranplätze",
            "NeinDoch",
            "WasMachenSachen",
            "WoranHatsgelegen",
            "Zero",
            "Zückerli",
        ],
    },
    titles={
        "drawnTogether": "Drawn Together",
        "spongeBob": "SpongeBob",
        "Deutsche Memes": "Deutsche Memes",
    },
    colors={
        "drawnTogether": "#E91E63",
        "spongeBob": "#FFEB3B",
        "Deutsche Memes": "#4CAF50",
    },
)
