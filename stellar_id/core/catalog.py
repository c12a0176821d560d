"""
Star name catalogs.

DEFAULT_STAR_NAMES is the ordered list used for star selection unless the
caller supplies its own names or asks for the real-star catalog. Order is part
of the ID contract: reordering any list changes every ID generated from it.

REAL_STARS carries display metadata (HYG database values) for get_star_info().
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class StarRecord:
    """
    Metadata for a named star.

    Fields:
        name: Upper-case catalog name
        distance: Distance from Earth in light years
        magnitude: Apparent visual magnitude
        spectral_type: Spectral classification
        constellation: Host constellation
    """
    name: str
    distance: float
    magnitude: float
    spectral_type: str
    constellation: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_STAR_NAMES: Tuple[str, ...] = (
    "SIRIUS",
    "VEGA",
    "ALTAIR",
    "RIGEL",
    "ANTARES",
    "ALDEBARAN",
    "BETELGEUSE",
    "ARCTURUS",
    "POLLUX",
    "DENEB",
)

REAL_STARS: Tuple[StarRecord, ...] = (
    StarRecord("SIRIUS", 8.6, -1.46, "A1V", "Canis Major"),
    StarRecord("CANOPUS", 310, -0.74, "F0II", "Carina"),
    StarRecord("ARCTURUS", 37, -0.05, "K1.5III", "Boötes"),
    StarRecord("VEGA", 25, 0.03, "A0V", "Lyra"),
    StarRecord("CAPELLA", 42, 0.08, "G8III", "Auriga"),
    StarRecord("RIGEL", 860, 0.12, "B8Ia", "Orion"),
    StarRecord("PROCYON", 11.4, 0.34, "F5IV-V", "Canis Minor"),
    StarRecord("ACHERNAR", 139, 0.46, "B6Vpe", "Eridanus"),
    StarRecord("BETELGEUSE", 640, 0.50, "M2Iab", "Orion"),
    StarRecord("HADAR", 390, 0.61, "B1III", "Centaurus"),
    StarRecord("ALTAIR", 17, 0.77, "A7V", "Aquila"),
    StarRecord("ACRUX", 320, 0.87, "B0.5IV", "Crux"),
    StarRecord("ALDEBARAN", 65, 0.87, "K5III", "Taurus"),
    StarRecord("ANTARES", 550, 0.96, "M1.5Iab", "Scorpius"),
    StarRecord("SPICA", 250, 0.98, "B1III-IV", "Virgo"),
    StarRecord("POLLUX", 34, 1.14, "K0III", "Gemini"),
    StarRecord("FOMALHAUT", 25, 1.16, "A3V", "Piscis Austrinus"),
    StarRecord("DENEB", 2600, 1.25, "A2Ia", "Cygnus"),
    StarRecord("MIMOSA", 280, 1.25, "B0.5III", "Crux"),
    StarRecord("REGULUS", 79, 1.36, "B7V", "Leo"),
    StarRecord("ADHARA", 430, 1.50, "B2II", "Canis Major"),
    StarRecord("CASTOR", 52, 1.58, "A1V", "Gemini"),
    StarRecord("GACRUX", 88, 1.63, "M3.5III", "Crux"),
    StarRecord("BELLATRIX", 250, 1.64, "B2III", "Orion"),
    StarRecord("ELNATH", 130, 1.65, "B7III", "Taurus"),
    StarRecord("MIAPLACIDUS", 111, 1.67, "A2IV", "Carina"),
    StarRecord("ALNILAM", 2000, 1.69, "B0Iab", "Orion"),
    StarRecord("ALNITAK", 1260, 1.74, "O9.5Ib", "Orion"),
    StarRecord("DUBHE", 124, 1.79, "K0III", "Ursa Major"),
    StarRecord("MERAK", 79, 2.37, "A1V", "Ursa Major"),
    StarRecord("PHECDA", 84, 2.44, "A0Ve", "Ursa Major"),
    StarRecord("MEGREZ", 81, 3.32, "A3V", "Ursa Major"),
    StarRecord("ALIOTH", 81, 1.76, "A0pCr", "Ursa Major"),
    StarRecord("MIZAR", 78, 2.23, "A1V", "Ursa Major"),
    StarRecord("ALKAID", 101, 1.85, "B3V", "Ursa Major"),
    StarRecord("POLARIS", 433, 1.97, "F7Ib", "Ursa Minor"),
    StarRecord("KOCHAB", 131, 2.07, "K4III", "Ursa Minor"),
    StarRecord("ALPHA_CENTAURI", 4.4, -0.27, "G2V", "Centaurus"),
    StarRecord("BETA_CENTAURI", 390, 0.61, "B1III", "Centaurus"),
    StarRecord("GAMMA_CENTAURI", 130, 2.20, "A1IV", "Centaurus"),
    StarRecord("DELTA_CENTAURI", 395, 2.57, "B2IVne", "Centaurus"),
    StarRecord("EPSILON_CENTAURI", 430, 2.29, "B1III", "Centaurus"),
    StarRecord("ZETA_CENTAURI", 384, 2.55, "B2.5IV", "Centaurus"),
    StarRecord("ETA_CENTAURI", 308, 2.33, "B1.5Vne", "Centaurus"),
    StarRecord("THETA_CENTAURI", 61, 2.06, "K0IIIb", "Centaurus"),
    StarRecord("IOTA_CENTAURI", 59, 2.75, "A2V", "Centaurus"),
    StarRecord("KAPPA_CENTAURI", 539, 3.13, "B2IV", "Centaurus"),
    StarRecord("LAMBDA_CENTAURI", 410, 3.11, "B9III", "Centaurus"),
    StarRecord("MU_CENTAURI", 527, 3.47, "B2Vne", "Centaurus"),
    StarRecord("NU_CENTAURI", 475, 3.41, "B2IV", "Centaurus"),
    StarRecord("XI_CENTAURI", 20.7, 4.83, "G2V", "Centaurus"),
    StarRecord("OMICRON_CENTAURI", 136, 4.12, "K0III", "Centaurus"),
    StarRecord("PI_CENTAURI", 321, 3.89, "B5Vn", "Centaurus"),
    StarRecord("RHO_CENTAURI", 342, 3.97, "B3V", "Centaurus"),
    StarRecord("SIGMA_CENTAURI", 442, 3.91, "B2V", "Centaurus"),
    StarRecord("TAU_CENTAURI", 132, 3.85, "A2V", "Centaurus"),
    StarRecord("UPSILON_CENTAURI", 417, 3.87, "B2IV-V", "Centaurus"),
    StarRecord("PHI_CENTAURI", 465, 3.83, "B2IV", "Centaurus"),
    StarRecord("CHI_CENTAURI", 384, 4.36, "B2V", "Centaurus"),
    StarRecord("PSI_CENTAURI", 247, 4.05, "A0V", "Centaurus"),
    StarRecord("OMEGA_CENTAURI", 15800, 3.7, "G5", "Centaurus"),
)

_BY_NAME: Dict[str, StarRecord] = {star.name: star for star in REAL_STARS}


def list_default_star_names() -> List[str]:
    """Default selection list, in selection order."""
    return list(DEFAULT_STAR_NAMES)


def list_real_star_names() -> List[str]:
    """Names of the real-star catalog, in selection order."""
    return [star.name for star in REAL_STARS]


def get_real_star_data() -> List[StarRecord]:
    return list(REAL_STARS)


def get_star_info(name: str) -> Optional[StarRecord]:
    """
    Look up a star by name (case-insensitive).

    Returns:
        StarRecord or None if the star is not in the catalog
    """
    if not isinstance(name, str):
        return None
    return _BY_NAME.get(name.strip().upper())
