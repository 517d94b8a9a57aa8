"""
Catalog records - products and the company profile.

Records are frozen: the catalog is loaded once at process start and never
mutated afterwards.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Product:
    """A single piece of gym equipment in the catalog"""
    name: str
    category: str
    description: str
    specs: Mapping[str, str] = field(default_factory=dict)
    warranty: Tuple[str, ...] = ()
    shipping: Tuple[str, ...] = ()
    price: Optional[str] = None

    def __post_init__(self):
        # Freeze nested containers so a shared record can't be edited in place
        object.__setattr__(self, "specs", MappingProxyType(dict(self.specs)))
        object.__setattr__(self, "warranty", tuple(self.warranty))
        object.__setattr__(self, "shipping", tuple(self.shipping))

    @property
    def searchable_text(self) -> str:
        """Name, description, category, spec values, warranty and shipping joined by spaces"""
        parts = [
            self.name,
            self.description,
            self.category,
            " ".join(self.specs.values()),
            *self.warranty,
            *self.shipping,
        ]
        return " ".join(parts)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            name=data["name"],
            category=data["category"],
            description=data.get("description", ""),
            specs={str(k): str(v) for k, v in (data.get("specs") or {}).items()},
            warranty=tuple(data.get("warranty") or ()),
            shipping=tuple(data.get("shipping") or ()),
            price=data.get("price"),
        )


@dataclass(frozen=True)
class CompanyProfile:
    """Free-text block describing who we are, where we are and our policies"""
    text: str
