"""Pydantic v2 models for the intermediate PlantUML entity graph."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class AccessModifier(str, Enum):
    """Visibility of a class member."""
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    PACKAGE = "package"


class ClassKind(str, Enum):
    """Kind of a class-like declaration."""
    CLASS = "class"
    INTERFACE = "interface"


class RelationKind(str, Enum):
    """Kind of relationship drawn between two declarations."""
    ASSOCIATION = "association"
    INHERITANCE = "inheritance"
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"
    DEPENDENCY = "dependency"
    UNKNOWN = "unknown"


class CardinalityKind(str, Enum):
    """Shape of a relation endpoint multiplicity."""
    EXACT = "exact"
    RANGE = "range"
    MANY = "many"
    CUSTOM = "custom"


class Attribute(BaseModel):
    """Attribute line inside a class or interface body."""
    name: str
    type: str | None = None
    access: AccessModifier = AccessModifier.PUBLIC

    model_config = {"frozen": True}


class Method(BaseModel):
    """Method line inside a class or interface body."""
    name: str
    return_type: str | None = None
    access: AccessModifier = AccessModifier.PUBLIC

    model_config = {"frozen": True}


class ClassLike(BaseModel):
    """A class or interface declaration."""
    name: str
    kind: ClassKind = ClassKind.CLASS
    attributes: list[Attribute] = Field(default_factory=list)
    methods: list[Method] = Field(default_factory=list)

    model_config = {"frozen": True}


class EnumType(BaseModel):
    """An enum declaration; value order is preserved."""
    name: str
    values: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class Cardinality(BaseModel):
    """Parsed multiplicity of one relation endpoint.

    ``raw`` always keeps the original token. ``value`` is set for exact
    cardinalities, ``lower``/``upper`` for ranges (``None`` means
    unbounded) and ``label`` for anything unrecognised.
    """
    kind: CardinalityKind
    raw: str
    value: int | None = None
    lower: int | None = None
    upper: int | None = None
    label: str | None = None

    model_config = {"frozen": True}


class CardinalityDecision(BaseModel):
    """Structural shape derived from a cardinality."""
    is_array: bool = False
    required: bool = False
    min_items: int | None = None
    max_items: int | None = None

    model_config = {"frozen": True}


class Relation(BaseModel):
    """A relationship line between two named declarations."""
    source: str
    target: str
    kind: RelationKind
    symbol: str = ""
    from_cardinality: Cardinality | None = None
    to_cardinality: Cardinality | None = None

    model_config = {"frozen": True}

    @computed_field
    @property
    def cardinality(self) -> Cardinality | None:
        """The target-side cardinality, which drives property shape."""
        return self.to_cardinality


class Diagram(BaseModel):
    """Everything parsed out of one PlantUML text."""
    classes: list[ClassLike] = Field(default_factory=list)
    interfaces: list[ClassLike] = Field(default_factory=list)
    enums: list[EnumType] = Field(default_factory=list)
    relations: list[Relation] = Field(default_factory=list)

    model_config = {"frozen": True}

    def class_likes(self) -> list[ClassLike]:
        """Classes followed by interfaces, in declaration order."""
        return [*self.classes, *self.interfaces]

    def component_names(self) -> set[str]:
        """Names that may be the target of a schema ``$ref``."""
        names = {entity.name for entity in self.class_likes()}
        names.update(enum.name for enum in self.enums)
        return names
