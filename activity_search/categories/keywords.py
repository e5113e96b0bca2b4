"""
Fixed multilingual keyword table for activity categories.

Each entry lists the canonical code, its display label, the natural-language
keywords users type (in many languages), and the enum-style aliases stored on
older records. Registration order matters: a keyword already claimed by an
earlier category keeps its first owner (e.g. "wandern" stays with walking).
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CategoryDefinition:
    """One row of the keyword table."""
    code: str
    label: str
    keywords: Tuple[str, ...]
    aliases: Tuple[str, ...] = ()


CATEGORY_DEFINITIONS: Tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        "1", "VTT",
        ("vtt", "mountain bike", "mountain biking", "mtb", "bicicleta de montana", "bicicleta de montaña",
         "bicicletta da montagna", "btt", "mountainbike", "горный велосипед", "山地车"),
        ("VTT", "EVENTCREATION.TYPE.VTT"),
    ),
    CategoryDefinition(
        "2", "SKI",
        ("ski", "skiing", "esqui", "esquiar", "sci", "sci alpino", "sciare", "skifahren", "lyzhi", "лыжи",
         "катание на лыжах", "горные лыжи", "スキー", "スキ", "스키", "滑雪"),
        ("SKI", "EVENTCREATION.TYPE.SKI"),
    ),
    CategoryDefinition(
        "3", "RUN",
        ("run", "running", "course", "course a pied", "jogging", "footing", "correr", "carrera", "corrida",
         "correre", "laufen", "lauf", "rennen", "marathon", "race", "бег", "бегать"),
        ("RUN", "COURSE", "EVENTCREATION.TYPE.RUN"),
    ),
    CategoryDefinition(
        "4", "WALK",
        ("walk", "walking", "marche", "promenade", "balade", "andar", "caminar", "paseo", "passeggiata",
         "spaziergang", "wandern", "步行", "散歩"),
        ("WALK", "MARCHE", "EVENTCREATION.TYPE.WALK"),
    ),
    CategoryDefinition(
        "5", "BIKE",
        ("bike", "biking", "velo", "vélo", "cycling", "cyclisme", "bicycle", "bicicleta", "bicicletta",
         "radfahren", "fahrrad", "自転車", "骑行"),
        ("BIKE", "VELO", "VÉLO", "EVENTCREATION.TYPE.BIKE"),
    ),
    CategoryDefinition(
        "6", "PARTY",
        ("party", "fete", "fête", "fiesta", "soirée", "celebration", "fest", "festen", "festivity",
         "festlichkeit", "celebracion", "celebración"),
        ("PARTY", "FETE", "FÊTE", "EVENTCREATION.TYPE.PARTY"),
    ),
    CategoryDefinition(
        "7", "VACATION",
        ("vacation", "vacances", "vacaciones", "vacanza", "urlaub", "holiday", "holidays", "ferie", "ferias",
         "праздники"),
        ("VACATION", "VACANCES", "EVENTCREATION.TYPE.VACATION"),
    ),
    CategoryDefinition(
        "8", "TRAVEL",
        ("travel", "voyage", "viaje", "viaggio", "reise", "trip", "journey", "viajar", "traveling",
         "travelling", "旅行", "旅"),
        ("TRAVEL", "VOYAGE", "EVENTCREATION.TYPE.TRAVEL"),
    ),
    CategoryDefinition(
        "9", "RANDO",
        ("rando", "randonnée", "randonnee", "hike", "hiking", "trek", "trekking", "senderismo", "excursion",
         "escursionismo", "wanderung", "wandern", "徒步", "ハイキング"),
        ("RANDO", "EVENTCREATION.TYPE.RANDO"),
    ),
    CategoryDefinition(
        "10", "PHOTOS",
        ("photos", "photo", "picture", "pictures", "imagenes", "immagini", "bilder", "fotografie", "fotos",
         "photoes", "写真", "照片"),
        ("PHOTOS", "EVENTCREATION.TYPE.PHOTOS"),
    ),
    CategoryDefinition(
        "11", "DOCUMENTS",
        ("documents", "document", "docs", "documentos", "documenti", "dokumente", "documentacion",
         "documentación", "documentation", "资料"),
        ("DOCUMENTS", "EVENTCREATION.TYPE.DOCUMENTS"),
    ),
    CategoryDefinition(
        "12", "FICHE",
        ("fiche", "sheet", "fact sheet", "datasheet", "scheda", "hoja", "blatt", "schede", "ficha",
         "schede informative"),
        ("FICHE", "EVENTCREATION.TYPE.FICHE"),
    ),
    CategoryDefinition(
        "13", "WINE",
        ("wine", "vin", "vino", "wein", "wijn", "вино", "ワイン", "葡萄酒", "יין", "κρασί", "نبيذ"),
        ("WINE", "VIN", "EVENTCREATION.TYPE.WINE"),
    ),
    CategoryDefinition(
        "14", "OTHER",
        ("other", "autre", "otro", "altro", "andere", "其他", "その他", "أخرى", "אחר", "अन्य", "Другое", "Άλλο"),
        ("OTHER", "AUTRE", "EVENTCREATION.TYPE.OTHER"),
    ),
    CategoryDefinition(
        "15", "VISIT",
        ("visit", "visite", "visita", "besuch", "访问", "訪問", "زيارة", "ביקור", "यात्रा", "Визит", "Επίσκεψη"),
        ("VISIT", "VISITE", "EVENTCREATION.TYPE.VISIT"),
    ),
    CategoryDefinition(
        "16", "WORK",
        ("work", "travaux", "trabajos", "lavori", "arbeiten", "工作", "作業", "أعمال", "עבודה", "काम", "Работы",
         "Εργασίες"),
        ("WORK", "TRAVAUX", "EVENTCREATION.TYPE.WORK"),
    ),
    CategoryDefinition(
        "17", "FAMILY",
        ("family", "famille", "familia", "famiglia", "familie", "家庭", "家族", "عائلة", "משפחה", "परिवार",
         "Семья", "Οικογένεια"),
        ("FAMILY", "FAMILLE", "EVENTCREATION.TYPE.FAMILY"),
    ),
)
