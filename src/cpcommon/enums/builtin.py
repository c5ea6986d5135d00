"""Built-in classifications and the classification catalog.

Each classification is a TypedConstant subclass plus a Classification
holding its declared members. Members are created on first access, e.g.
``GENDER.MALE`` or ``GENDER.get_by_code("male")``.

The factory for each classification can be swapped through the property
``cpcommon.enums.<Name>.factory``; when it is absent, SequentialFactory
is used.
"""

from __future__ import annotations

from cpcommon.enums.classification import Classification
from cpcommon.enums.constant import TypedConstant


def factory_key(name: str) -> str:
    """Property key naming the factory for classification *name*."""
    return f"cpcommon.enums.{name}.factory"


class Contact(TypedConstant):
    """Means of contacting a person."""


class Continent(TypedConstant):
    pass


class Gender(TypedConstant):
    pass


class MaritalStatus(TypedConstant):
    pass


class Oceans(TypedConstant):
    pass


class Race(TypedConstant):
    pass


class Relationship(TypedConstant):
    """Relationship of one person to another."""


CONTACT: Classification[Contact] = Classification(
    "Contact",
    Contact,
    factory_key=factory_key("Contact"),
    members={
        "CELL": ("cell", "Cell"),
        "EMAIL": ("email", "Email"),
        "FAX": ("fax", "Fax"),
        "IN_PERSON": ("in-person", "In-Person"),
        "MAIL": ("mail", "Mail"),
        "PHONE": ("phone", "Phone"),
    },
)

CONTINENT: Classification[Continent] = Classification(
    "Continent",
    Continent,
    factory_key=factory_key("Continent"),
    members={
        "AFRICA": ("AF", "Africa"),
        "ANTARCTICA": ("AN", "Antarctica"),
        "ASIA": ("AS", "Asia"),
        "AUSTRALIA": ("AU", "Australia"),
        "EUROPE": ("EU", "Europe"),
        "NORTH_AMERICA": ("NA", "North America"),
        "OCEANIA": ("OC", "Oceania"),
        "SOUTH_AMERICA": ("SA", "South America"),
    },
)

GENDER: Classification[Gender] = Classification(
    "Gender",
    Gender,
    factory_key=factory_key("Gender"),
    members={
        "FEMALE": ("female", "Female", "F"),
        "MALE": ("male", "Male", "M"),
    },
)

MARITAL_STATUS: Classification[MaritalStatus] = Classification(
    "MaritalStatus",
    MaritalStatus,
    factory_key=factory_key("MaritalStatus"),
    members={
        "ANNULLED": ("annulled", "Annulled"),
        "COMMON_LAW": ("common-law", "Common-Law"),
        "DIVORCED": ("divorced", "Divorced"),
        "MARRIED": ("married", "Married"),
        "SEPARATED": ("separated", "Separated"),
        "SINGLE": ("single", "Single"),
        "WIDOWED": ("widowed", "Widowed"),
    },
)

OCEANS: Classification[Oceans] = Classification(
    "Oceans",
    Oceans,
    factory_key=factory_key("Oceans"),
    members={
        "ARCTIC_OCEAN": ("ARC", "Arctic Ocean"),
        "ATLANTIC_OCEAN": ("ATL", "Atlantic Ocean"),
        "INDIAN_OCEAN": ("IND", "Indian Ocean"),
        "PACIFIC_OCEAN": ("PAC", "Pacific Ocean"),
        "SOUTHERN_OCEAN": ("SOU", "Southern Ocean"),
    },
)

RACE: Classification[Race] = Classification(
    "Race",
    Race,
    factory_key=factory_key("Race"),
    members={
        "ALASKAN_NATIVE": ("alaskan", "Alaskan Native", "AN"),
        "ASIAN": ("asian", "Asian", "A"),
        "BLACK": ("black", "Black", "B"),
        "HISPANIC": ("hispanic", "Hispanic", "H"),
        "NATIVE_AMERICAN": ("native american", "Native American", "NA"),
        "WHITE": ("white", "White", "W"),
    },
)

RELATIONSHIP: Classification[Relationship] = Classification(
    "Relationship",
    Relationship,
    factory_key=factory_key("Relationship"),
    members={
        "AUNT": ("aunt", "Aunt"),
        "BROTHER": ("brother", "Brother"),
        "BOYFRIEND": ("boyfriend", "Boyfriend"),
        "CHILD": ("child", "Child"),
        "COUSIN": ("cousin", "Cousin"),
        "DAUGHTER": ("daughter", "Daughter"),
        "FATHER": ("father", "Father"),
        "FIANCE": ("fiance", "Fiance"),
        "FRIEND": ("friend", "Friend"),
        "GIRLFRIEND": ("girlfriend", "Girlfriend"),
        "GRANDDAUGHTER": ("granddaughter", "Granddaughter"),
        "GRANDFATHER": ("grandfather", "Grandfather"),
        "GRANDMOTHER": ("grandmother", "Grandmother"),
        "GRANDSON": ("grandson", "Grandson"),
        "GREAT_GRANDDAUGHTER": ("great granddaughter", "Great Granddaughter"),
        "GREAT_GRANDFATHER": ("great grandfather", "Great Grandfather"),
        "GREAT_GRANDMOTHER": ("great grandmother", "Great Grandmother"),
        "GREAT_GRANDSON": ("great grandson", "Great Grandson"),
        "HALF_BROTHER": ("half brother", "Half Brother"),
        "HALF_SISTER": ("half sister", "Half Sister"),
        "HUSBAND": ("husband", "Husband"),
        "MOTHER": ("mother", "Mother"),
        "NEPHEW": ("nephew", "Nephew"),
        "PARENT": ("parent", "Parent"),
        "PARTNER": ("partner", "Partner"),
        "SELF": ("self", "Self"),
        "SIBLING": ("sibling", "Sibling"),
        "SISTER": ("sister", "Sister"),
        "SON": ("son", "Son"),
        "STEP_BROTHER": ("step brother", "Step Brother"),
        "STEP_FATHER": ("step father", "Step Father"),
        "STEP_MOTHER": ("step mother", "Step Mother"),
        "STEP_SISTER": ("step sister", "Step Sister"),
        "UNCLE": ("uncle", "Uncle"),
        "WIFE": ("wife", "Wife"),
    },
)


# ---------------------------------------------------------------------------
# Classification catalog
# ---------------------------------------------------------------------------

# Populated by _register_classifications() at module load time.
CLASSIFICATION_REGISTRY: dict[str, Classification[TypedConstant]] = {}


def register_classification(classification: Classification[TypedConstant]) -> None:
    """Add *classification* to the catalog under its name.

    Raises:
        ValueError: If another classification already uses the name.
    """
    existing = CLASSIFICATION_REGISTRY.get(classification.name)
    if existing is not None and existing is not classification:
        msg = f"Classification {classification.name!r} is already registered"
        raise ValueError(msg)
    CLASSIFICATION_REGISTRY[classification.name] = classification


def get_classification(name: str) -> Classification[TypedConstant]:
    """Look up a classification by name, ignoring case.

    Raises:
        KeyError: If no classification has that name.
    """
    wanted = name.strip().lower()
    for registered_name, classification in CLASSIFICATION_REGISTRY.items():
        if registered_name.lower() == wanted:
            return classification
    raise KeyError(name)


def _register_classifications() -> None:
    for classification in (
        CONTACT,
        CONTINENT,
        GENDER,
        MARITAL_STATUS,
        OCEANS,
        RACE,
        RELATIONSHIP,
    ):
        register_classification(classification)


_register_classifications()
