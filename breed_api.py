import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import requests

logger = logging.getLogger(__name__)

DEFAULT_BREED_API_URL = "https://model-backend-nxni.onrender.com/get-breed"
LIST_FIELD = "body"

# Raw field names per backend casing contract
FIELD_CONTRACTS = {
    "pascal": {
        "id": ("_id", "id"),
        "name": ("BreedName",),
        "locations": ("Location",),
        "main_uses": ("MainUses",),
        "physical_desc": ("PhysicalDesc",),
        "species": ("Species",),
        "breeding_trait": ("BreedingTrait",),
        "count": ("Count",),
    },
    "camel": {
        "id": ("_id", "id"),
        "name": ("breedName",),
        "locations": ("location",),
        "main_uses": ("mainUses",),
        "physical_desc": ("physicalDesc",),
        "species": ("species",),
        "breeding_trait": ("breedingTrait",),
        "count": ("count",),
    },
}


class FetchFailure(Exception):
    """The breed list could not be fetched or had an unexpected shape."""


@dataclass(frozen=True)
class BreedRecord:
    id: str
    name: str
    locations: Tuple[str, ...] = field(default_factory=tuple)
    main_uses: str = ""
    physical_desc: str = ""
    species: str = ""
    breeding_trait: str = ""
    count: Optional[int] = None

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "locations": list(self.locations),
            "mainUses": self.main_uses,
            "physicalDesc": self.physical_desc,
            "species": self.species,
            "breedingTrait": self.breeding_trait,
            "count": self.count,
        }


def get_contract(casing):
    try:
        return FIELD_CONTRACTS[casing]
    except KeyError:
        raise ValueError(
            f"Unknown breed API casing {casing!r}, expected one of {sorted(FIELD_CONTRACTS)}"
        ) from None


def _pick(raw, keys):
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _text(value):
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _count(value):
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def normalize_breed(raw, casing="pascal"):
    """
    Map one raw breed object from the API onto a BreedRecord.
    Missing text fields become "", a missing or non-list location field
    becomes an empty tuple, and an unusable count becomes None.
    """
    contract = get_contract(casing)
    locations = _pick(raw, contract["locations"])
    if isinstance(locations, list):
        locations = tuple(_text(loc) if not isinstance(loc, str) else loc for loc in locations)
    else:
        locations = ()

    return BreedRecord(
        id=_text(_pick(raw, contract["id"])),
        name=_text(_pick(raw, contract["name"])),
        locations=locations,
        main_uses=_text(_pick(raw, contract["main_uses"])),
        physical_desc=_text(_pick(raw, contract["physical_desc"])),
        species=_text(_pick(raw, contract["species"])),
        breeding_trait=_text(_pick(raw, contract["breeding_trait"])),
        count=_count(_pick(raw, contract["count"])),
    )


def fetch_breeds(url=DEFAULT_BREED_API_URL, language=None, casing="pascal",
                 timeout=None, language_header="Accept-Language"):
    """
    GET the breed list and return it as BreedRecords in response order.
    Raises FetchFailure on any transport, status, JSON or shape problem.
    """
    get_contract(casing)
    headers = {}
    if language:
        headers[language_header] = language

    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as err:
        raise FetchFailure(f"Request to {url} failed: {err}") from err

    if not resp.ok:
        raise FetchFailure(f"HTTP error! Status: {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as err:
        raise FetchFailure(f"Response from {url} is not valid JSON: {err}") from err

    if not isinstance(data, dict) or not isinstance(data.get(LIST_FIELD), list):
        raise FetchFailure("Invalid data format from API.")

    breeds = []
    for position, raw in enumerate(data[LIST_FIELD]):
        if not isinstance(raw, dict):
            logger.warning("Skipping breed entry %d: expected an object, got %s",
                           position, type(raw).__name__)
            continue
        breeds.append(normalize_breed(raw, casing))

    logger.info("Fetched %d breeds (language=%s)", len(breeds), language or "-")
    return breeds
