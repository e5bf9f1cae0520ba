"""ICAO identifier prefix table.

Every known 1-2 letter ICAO location indicator prefix mapped to the region(s)
it belongs to. The table is built once at import time and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional


@dataclass(frozen=True)
class IcaoPrefix:
    """An ICAO identifier prefix and its associated region(s).

    Attributes:
        code: 1-2 letter ICAO prefix code
        region_label: The region(s) associated to the prefix code in display format
        extra_detail: Optionally, any notable details associated with the prefix code,
            e.g. the other prefixes shared by the same region
    """
    code: str
    region_label: str
    extra_detail: Optional[str] = None

    def full_display_text(self) -> str:
        """Region label followed by the extra detail, when there is one."""
        if self.extra_detail is None:
            return self.region_label
        return f"{self.region_label} {self.extra_detail}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "region_label": self.region_label,
            "extra_detail": self.extra_detail,
        }


# (code, region label, extra detail)
_PREFIX_ROWS = (
    # A - Western South Pacific
    ("AG", "Solomon Islands", None),
    ("AN", "Nauru", None),
    ("AY", "Papua New Guinea", None),

    # B - Greenland, Iceland, and Kosovo (European Alternate)
    ("BG", "Greenland", None),
    ("BI", "Iceland", None),
    ("BK", "Kosovo", None),

    # C - Canada
    ("C", "Canada", None),

    # D - Eastern parts of West Africa and Maghreb
    ("DA", "Algeria", None),
    ("DB", "Benin", None),
    ("DF", "Burkina Faso", None),
    ("DG", "Ghana", None),
    ("DI", "Côte d'Ivoire", None),
    ("DN", "Nigeria", None),
    ("DR", "Niger", None),
    ("DT", "Tunisia", None),
    ("DX", "Togo", None),

    # E - Northern Europe
    ("EB", "Belgium", None),
    ("ED", "Germany (civil)", None),
    ("EE", "Estonia", None),
    ("EF", "Finland", None),
    ("EG", "United Kingdom", "(and Crown Dependencies)"),
    ("EH", "Netherlands", None),
    ("EI", "Ireland", None),
    ("EK", "Denmark, The Faroe Islands", None),
    ("EL", "Luxembourg", None),
    ("EN", "Norway", None),
    ("EP", "Poland", None),
    ("ES", "Sweden", None),
    ("ET", "Germany (military)", None),
    ("EV", "Latvia", None),
    ("EY", "Lithuania", None),

    # F - Most of Central Africa, Southern Africa, and the Indian Ocean
    ("FA", "South Africa", None),
    ("FB", "Botswana", None),
    ("FC", "Republic of the Congo", None),
    ("FD", "Eswatini", None),
    ("FE", "Central African Republic", None),
    ("FG", "Equatorial Guinea", None),
    ("FH", "Saint Helena, Ascension, Tristan da Cunha", None),
    ("FI", "Mauritius", None),
    ("FJ", "British Indian Ocean Territory", None),
    ("FK", "Cameroon", None),
    ("FL", "Zambia", None),
    ("FM", "Comoros, France (Mayotte and Réunion), Madagascar", None),
    ("FN", "Angola", None),
    ("FO", "Gabon", None),
    ("FP", "São Tomé, Príncipe", None),
    ("FQ", "Mozambique", None),
    ("FS", "Seychelles", None),
    ("FT", "Chad", None),
    ("FV", "Zimbabwe", None),
    ("FW", "Malawi", None),
    ("FX", "Lesotho", None),
    ("FY", "Namibia", None),
    ("FZ", "Democratic Republic of the Congo", None),

    # G - Western parts of West Africa and Maghreb
    ("GA", "Mali", None),
    ("GB", "The Gambia", None),
    ("GC", "Spain (Canary Islands)", None),
    ("GE", "Spain (Ceuta and Melilla)", None),
    ("GF", "Sierra Leone", None),
    ("GG", "Guinea-Bissau", None),
    ("GL", "Liberia", None),
    ("GM", "Morocco", None),
    ("GO", "Senegal", None),
    ("GQ", "Mauritania", None),
    ("GS", "Western Sahara", None),
    ("GU", "Guinea", None),
    ("GV", "Cape Verde", None),

    # H - East Africa and Northeast Africa
    ("HA", "Ethiopia", None),
    ("HB", "Burundi", None),
    ("HC", "Somalia", "(including Somaliland)"),
    ("HD", "Djibouti", None),
    ("HE", "Egypt", None),
    ("HH", "Eritrea", None),
    ("HJ", "South Sudan", None),
    ("HK", "Kenya", None),
    ("HL", "Libya", None),
    ("HR", "Rwanda", None),
    ("HS", "Sudan", None),
    ("HT", "Tanzania", None),
    ("HU", "Uganda", None),

    # K - Contiguous United States
    ("K", "Contiguous United States", None),

    # L - Southern Europe, Israel, Palestine and Turkey
    ("LA", "Albania", None),
    ("LB", "Bulgaria", None),
    ("LC", "Cyprus", None),
    ("LD", "Croatia", None),
    ("LE", "Spain", "(mainland section and Balearic Islands)"),
    ("LF", "France", "(Metropolitan France; including Saint-Pierre and Miquelon)"),
    ("LG", "Greece", None),
    ("LH", "Hungary", None),
    ("LI", "Italy", "(and San Marino)"),
    ("LJ", "Slovenia", None),
    ("LK", "Czech Republic", None),
    ("LL", "Israel", None),
    ("LM", "Malta", None),
    ("LN", "Monaco", None),
    ("LO", "Austria", None),
    ("LP", "Portugal", "(including the Azores and Madeira)"),
    ("LQ", "Bosnia and Herzegovina", None),
    ("LR", "Romania", None),
    ("LS", "Switzerland and Liechtenstein", None),
    ("LT", "Turkey", None),
    ("LU", "Moldova", None),
    ("LV", "Palestine/Palestinian territories", None),
    ("LW", "North Macedonia", None),
    ("LX", "Gibraltar", None),
    ("LY", "Serbia and Montenegro", None),
    ("LZ", "Slovakia", None),

    # M - Central America, Mexico and northern/western parts of the Caribbean
    ("MB", "Turks and Caicos Islands", None),
    ("MD", "Dominican Republic", None),
    ("MG", "Guatemala", None),
    ("MH", "Honduras", None),
    ("MK", "Jamaica", None),
    ("MM", "Mexico", None),
    ("MN", "Nicaragua", None),
    ("MP", "Panama", None),
    ("MR", "Costa Rica", None),
    ("MS", "El Salvador", None),
    ("MT", "Haiti", None),
    ("MU", "Cuba", None),
    ("MW", "Cayman Islands", None),
    ("MY", "Bahamas", None),
    ("MZ", "Belize", None),

    # N - Most of the South Pacific and New Zealand
    ("NC", "Cook Islands", None),
    ("NF", "Fiji, Tonga", None),
    ("NG", "Kiribati (Gilbert Islands), Tuvalu", None),
    ("NI", "Niue", None),
    ("NL", "France (Wallis, Futuna)", None),
    ("NS", "Samoa, United States (American Samoa)", None),
    ("NT", "France (French Polynesia)", None),
    ("NV", "Vanuatu", None),
    ("NW", "France (New Caledonia)", None),
    ("NZ", "New Zealand, parts of Antarctica", None),

    # O - Southwest Asia, including Gulf States, Iran, Iraq, Pakistan
    ("OA", "Afghanistan", None),
    ("OB", "Bahrain", None),
    ("OE", "Saudi Arabia", None),
    ("OI", "Iran", None),
    ("OJ", "Jordan and the West Bank", None),
    ("OK", "Kuwait", None),
    ("OL", "Lebanon", None),
    ("OM", "United Arab Emirates", None),
    ("OO", "Oman", None),
    ("OP", "Pakistan", None),
    ("OR", "Iraq", None),
    ("OS", "Syria", None),
    ("OT", "Qatar", None),
    ("OY", "Yemen", None),

    # P - most of the North Pacific, and Kiribati
    ("PA", "US (Alaska)", "(also PF, PO and PP)"),
    ("PB", "US (Baker Island)", None),
    ("PC", "Kiribati (Canton Airfield, Phoenix Islands)", None),
    ("PF", "US (Alaska)", "(also PA, PO and PP)"),
    ("PG", "US (Guam, Northern Mariana Islands)", None),
    ("PH", "US (Hawaii)", None),
    ("PJ", "US (Johnston Atoll)", None),
    ("PK", "Marshall Islands", None),
    ("PL", "Kiribati (Line Islands)", None),
    ("PM", "US (Midway Island)", None),
    ("PO", "US (Alaska)", "(also PA, PF and PP)"),
    ("PP", "US (Alaska)", "(also PA, PF and PO)"),
    ("PT", "Federated States of Micronesia, Palau", None),
    ("PW", "US (Wake Island)", None),

    # R - Japan, S. Korea, Philippines
    ("RC", "Republic of China (Taiwan)", None),
    ("RJ", "Japan (Mainland)", None),
    ("RK", "South Korea (Republic of Korea)", None),
    ("RO", "Japan (Okinawa)", None),
    ("RP", "Philippines", None),

    # S - South America
    ("SA", "Argentina, parts of Antarctica", None),
    ("SB", "Brazil", "(also SD, SI, SJ, SN, SS and SW)"),
    ("SC", "Chile, Easter Island, parts of Antarctica", "(also SH)"),
    ("SD", "Brazil", "(also SB, SI, SJ, SN, SS and SW)"),
    ("SE", "Ecuador", None),
    ("SF", "United Kingdom (Falkland Islands)", None),
    ("SG", "Paraguay", None),
    ("SH", "Chile", "(also SC)"),
    ("SI", "Brazil", "(also SB, SD, SJ, SN, SS and SW)"),
    ("SJ", "Brazil", "(also SB, SD, SI, SN, SS and SW)"),
    ("SK", "Colombia", None),
    ("SL", "Bolivia", None),
    ("SM", "Suriname", None),
    ("SN", "Brazil", "(also SB, SD, SI, SJ, SS and SW)"),
    ("SO", "France (French Guiana)", None),
    ("SP", "Peru", None),
    ("SS", "Brazil", "(also SB, SD, SI, SJ, SN and SW)"),
    ("SU", "Uruguay", None),
    ("SV", "Venezuela", None),
    ("SW", "Brazil", "(also SB, SD, SI, SJ, SN and SS)"),
    ("SY", "Guyana", None),

    # T - Eastern and southern parts of the Caribbean
    ("TA", "Antigua and Barbuda", None),
    ("TB", "Barbados", None),
    ("TD", "Dominica", None),
    ("TF", "France (Guadeloupe, Martinique, Saint Barthélemy, Saint Martin)", None),
    ("TG", "Grenada", None),
    ("TI", "US (U.S. Virgin Islands)", None),
    ("TJ", "US (Puerto Rico)", None),
    ("TK", "Saint Kitts, Nevis", None),
    ("TL", "Saint Lucia", None),
    ("TN", "Caribbean Netherlands, Aruba, Curaçao, Sint Maarten", None),
    ("TQ", "UK (Anguilla)", None),
    ("TR", "UK (Montserrat)", None),
    ("TT", "Trinidad, Tobago", None),
    ("TU", "UK (British Virgin Islands)", None),
    ("TV", "Saint Vincent, The Grenadines", None),
    ("TX", "UK (Bermuda)", None),

    # U - Most former Soviet countries
    ("U", "Russia", None),
    ("UA", "Kazakhstan", None),
    ("UB", "Azerbaijan", None),
    ("UC", "Kyrgyzstan", None),
    ("UD", "Armenia", None),
    ("UG", "Georgia", None),
    ("UK", "Ukraine", None),
    ("UM", "Belarus, Russia (Kaliningrad Oblast)", None),
    ("UT", "Tajikistan, Turkmenistan, Uzbekistan", None),

    # V - Many South Asian countries, mainland Southeast Asia, Hong Kong and Macau
    ("VA", "India (West India)", None),
    ("VC", "Sri Lanka", None),
    ("VD", "Cambodia", None),
    ("VE", "India (East India)", None),
    ("VG", "Bangladesh", None),
    ("VH", "Hong Kong", None),
    ("VI", "India (North India)", None),
    ("VL", "Laos", None),
    ("VM", "Macau", None),
    ("VN", "Nepal", None),
    ("VO", "India (South India)", None),
    ("VQ", "Bhutan", None),
    ("VR", "Maldives", None),
    ("VT", "Thailand", None),
    ("VV", "Vietnam", None),
    ("VY", "Myanmar", None),

    # W - Most of Maritime Southeast Asia
    ("WA", "Indonesia", "(also WI, WQ and WR)"),
    ("WB", "Brunei, Malaysia (East Malaysia)", None),
    ("WI", "Indonesia", "(also WA, WQ and WR)"),
    ("WM", "Malaysia (Peninsular Malaysia)", None),
    ("WP", "Timor-Leste", None),
    ("WQ", "Indonesia", "(also WA, WI and WR)"),
    ("WR", "Indonesia", "(also WA, WI and WQ)"),
    ("WS", "Singapore", None),

    # Y - Australia
    ("Y", "Australia", "(including Norfolk Island, Christmas Island, Cocos (Keeling) Islands and Australian Antarctic Territory)"),

    # Z - China, North Korea and Mongolia
    ("Z", "Mainland China", "(except ZK and ZM)"),
    ("ZK", "North Korea", None),
    ("ZM", "Mongolia", None),
)

PREFIXES: Mapping[str, IcaoPrefix] = MappingProxyType(
    {code: IcaoPrefix(code, region, extra) for code, region, extra in _PREFIX_ROWS}
)


def lookup(code: str) -> Optional[IcaoPrefix]:
    """Get the prefix entry for an exact 1 or 2 letter code."""
    return PREFIXES.get(code)


def all_prefixes() -> List[IcaoPrefix]:
    """Get all prefix entries sorted by code."""
    return [PREFIXES[code] for code in sorted(PREFIXES)]
