"""Keyword lexicons for dimension scoring, emotion and brand detection."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .models import DimensionFamily, Emotion


class Polarity(Enum):
    POSITIVE = 1
    NEGATIVE = -1


@dataclass(frozen=True)
class LexiconRule:
    """Alternative spellings that move a dimension score by ``weight`` once."""
    terms: Tuple[str, ...]
    weight: int
    polarity: Polarity = Polarity.POSITIVE

    @property
    def signed_weight(self) -> int:
        return self.weight * self.polarity.value


@dataclass(frozen=True)
class FamilySpec:
    """Base score, ordered dimension rules and display labels of a family."""
    base: int
    rules: Dict[str, List[LexiconRule]]
    labels: Dict[str, str]

    @property
    def dimensions(self) -> List[str]:
        return list(self.rules)


def _pos(weight: int, *terms: str) -> LexiconRule:
    return LexiconRule(terms, weight, Polarity.POSITIVE)


def _neg(weight: int, *terms: str) -> LexiconRule:
    return LexiconRule(terms, weight, Polarity.NEGATIVE)


# UTAUT2 constructs (heatmap and report)
UTAUT2_RULES = {
    "PE": [
        _pos(25, "hemat", "irit", "efisien", "efficient"),
        _pos(20, "praktis", "bermanfaat", "useful", "practical"),
        _pos(15, "cepat sampai", "produktif", "productive"),
        _neg(20, "boros", "lambat", "slow"),
        _neg(25, "tidak berguna", "useless"),
    ],
    "EE": [
        _pos(25, "mudah", "gampang", "easy"),
        _pos(15, "simpel", "simple", "praktis"),
        _neg(30, "sulit", "susah", "difficult"),
        _neg(25, "ribet", "rumit", "complicated"),
    ],
    "SI": [
        _pos(30, "rekomendasi", "saran", "recommend"),
        _pos(25, "teman", "orang lain", "friend"),
        _pos(20, "keluarga", "tetangga", "family"),
        _neg(15, "sendiri", "pribadi"),
    ],
    "HM": [
        _pos(25, "senang", "seru", "fun", "enjoy"),
        _pos(20, "keren", "suka", "asyik", "love"),
        _pos(15, "menarik", "stylish"),
        _neg(20, "bosan", "membosankan", "boring"),
    ],
    "FC": [
        _pos(25, "spklu", "stasiun pengisian", "charging station"),
        _pos(20, "bengkel", "service center", "dealer"),
        _pos(15, "tersedia", "available", "suku cadang"),
        _neg(25, "susah cari", "belum ada", "tidak ada"),
        _neg(15, "jarang", "terbatas", "limited"),
    ],
    "PV": [
        _pos(30, "terjangkau", "affordable"),
        _pos(25, "worth", "sepadan", "sebanding"),
        _pos(20, "murah", "subsidi", "cheap"),
        _pos(10, "cicilan", "installment"),
        _neg(25, "mahal", "expensive", "overpriced"),
    ],
    "H": [
        _pos(25, "setiap hari", "sehari-hari", "daily"),
        _pos(25, "terbiasa", "kebiasaan", "habit"),
        _pos(20, "rutin", "selalu", "always"),
        _neg(20, "jarang pakai", "rarely"),
    ],
}

UTAUT2_LABELS = {
    "PE": "Performance Expectancy",
    "EE": "Effort Expectancy",
    "SI": "Social Influence",
    "HM": "Hedonic Motivation",
    "FC": "Facilitating Conditions",
    "PV": "Price Value",
    "H": "Habit",
}

UTAUT2_LABELS_ID = {
    "PE": "Harapan Kinerja",
    "EE": "Harapan Usaha",
    "SI": "Pengaruh Sosial",
    "HM": "Motivasi Hedonis",
    "FC": "Kondisi Pendukung",
    "PV": "Nilai Harga",
    "H": "Kebiasaan",
}

# Marketing Mix 8P factors (radar chart)
MARKETING_MIX_RULES = {
    "PROD": [
        _pos(25, "inovasi", "innovation"),
        _pos(20, "fitur", "feature"),
        _pos(20, "teknologi", "technology"),
        _pos(15, "kualitas", "quality"),
        _pos(10, "desain", "design"),
    ],
    "PRICE": [
        _pos(30, "harga", "price"),
        _pos(25, "terjangkau", "affordable"),
        _pos(20, "murah", "cheap"),
        _pos(15, "mahal", "expensive"),
        _pos(15, "cicilan", "installment"),
    ],
    "DIST": [
        _pos(30, "dealer", "distributor"),
        _pos(25, "toko", "store"),
        _pos(20, "online", "e-commerce"),
        _pos(15, "tersedia", "available"),
        _pos(10, "akses", "access"),
    ],
    "COMM": [
        _pos(30, "promosi", "promotion"),
        _pos(25, "iklan", "advertisement"),
        _pos(20, "media sosial", "social media"),
        _pos(15, "kampanye", "campaign"),
        _pos(10, "informasi", "information"),
    ],
    "HRD": [
        _pos(30, "layanan", "service"),
        _pos(25, "customer service", "cs"),
        _pos(20, "ramah", "friendly"),
        _pos(15, "profesional", "professional"),
        _pos(10, "bantuan", "help"),
    ],
    "CUSJ": [
        _pos(30, "pengalaman", "experience"),
        _pos(25, "mudah", "easy"),
        _pos(20, "nyaman", "comfortable"),
        _pos(15, "proses", "process"),
        _pos(10, "cepat", "fast"),
    ],
    "BRAND": [
        _pos(30, "brand", "merek"),
        _pos(25, "reputasi", "reputation"),
        _pos(20, "percaya", "trust"),
        _pos(15, "terkenal", "famous"),
        _pos(10, "gesits", "alva", "volta"),
    ],
    "COLLAB": [
        _pos(30, "kolaborasi", "collaboration"),
        _pos(25, "kemitraan", "partnership"),
        _pos(20, "ekosistem", "ecosystem"),
        _pos(15, "komunitas", "community"),
        _pos(10, "jaringan", "network"),
    ],
}

MARKETING_MIX_LABELS = {
    "PROD": "Innovative Product Strategy",
    "PRICE": "Innovative Pricing Architecture",
    "DIST": "Innovative Distribution Network",
    "COMM": "Innovative Communication Strategy",
    "HRD": "Innovative Human Resource Development",
    "CUSJ": "Innovative Customer Journey Design",
    "BRAND": "Innovative Brand Experience Creation",
    "COLLAB": "Collaboration Ecosystem Strategy",
}

# Marketing funnel stages (effectiveness radar)
MARKETING_FUNNEL_RULES = {
    "Awareness": [
        _pos(25, "tahu", "dengar"),
        _pos(20, "lihat", "kenal"),
        _pos(15, "baru", "pertama"),
        _pos(10, "gesits", "alva", "volta"),
    ],
    "Consideration": [
        _pos(30, "pertimbang", "pikir"),
        _pos(25, "bandingkan", "cari"),
        _pos(20, "informasi", "review"),
        _pos(15, "tertarik", "menarik"),
    ],
    "Preference": [
        _pos(30, "lebih suka", "pilih"),
        _pos(25, "terbaik", "favorit"),
        _pos(20, "unggul", "bagus"),
        _pos(15, "puas", "senang"),
    ],
    "Intent": [
        _pos(35, "beli", "ingin"),
        _pos(30, "akan", "rencana"),
        _pos(25, "segera", "siap"),
        _pos(15, "harga", "cicilan"),
    ],
    "Advocacy": [
        _pos(35, "rekomendasikan", "sarankan"),
        _pos(25, "ajak", "teman"),
        _pos(20, "bagikan", "cerita"),
        _pos(15, "puas", "percaya"),
    ],
}

# Six-dimension psycho-social variant
PSYCHO_SOCIAL_RULES = {
    "Trust": [
        _pos(30, "percaya", "yakin"),
        _pos(20, "aman", "terpercaya"),
        _neg(25, "ragu", "skeptis"),
    ],
    "Anxiety": [
        _pos(35, "takut", "khawatir"),
        _pos(25, "bahaya", "risiko"),
        _neg(30, "tenang", "aman"),
    ],
    "Excitement": [
        _pos(30, "tertarik", "menarik"),
        _pos(25, "senang", "suka"),
        _neg(20, "bosan", "biasa"),
    ],
    "Social Influence": [
        _pos(25, "teman", "orang lain"),
        _pos(30, "rekomendasi", "saran"),
        _neg(15, "sendiri", "pribadi"),
    ],
    "Self-Efficacy": [
        _pos(30, "bisa", "mampu"),
        _pos(25, "mudah", "gampang"),
        _neg(30, "sulit", "susah"),
    ],
    "Risk Perception": [
        _pos(35, "risiko", "bahaya"),
        _pos(25, "takut", "khawatir"),
        _neg(30, "aman", "terjamin"),
    ],
}

DIMENSION_FAMILIES: Dict[DimensionFamily, FamilySpec] = {
    DimensionFamily.UTAUT2: FamilySpec(50, UTAUT2_RULES, UTAUT2_LABELS),
    DimensionFamily.MARKETING_MIX: FamilySpec(35, MARKETING_MIX_RULES, MARKETING_MIX_LABELS),
    DimensionFamily.MARKETING_FUNNEL: FamilySpec(
        40, MARKETING_FUNNEL_RULES, {name: name for name in MARKETING_FUNNEL_RULES}
    ),
    DimensionFamily.PSYCHO_SOCIAL: FamilySpec(
        50, PSYCHO_SOCIAL_RULES, {name: name for name in PSYCHO_SOCIAL_RULES}
    ),
}

# Emotion keyword groups, checked in this order; first hit wins
EMOTION_RULES: List[Tuple[Emotion, Tuple[str, ...]]] = [
    (Emotion.SATISFACTION, ("bagus", "puas", "senang")),
    (Emotion.TRUST, ("percaya", "yakin", "aman")),
    (Emotion.FEAR, ("takut", "khawatir", "bahaya")),
    (Emotion.SKEPTICISM, ("ragu", "skeptis", "tidak yakin")),
]
DEFAULT_EMOTION = Emotion.INTEREST

# Indonesian electric motorcycle brands; model variants precede their parent
BRAND_VARIANTS = [
    "Gesits",
    "Alva",
    "Selis",
    "Viar Q1",
    "Viar",
    "Polytron Fox-R",
    "Polytron",
    "Fox-R",
    "Yadea",
    "NIU",
    "Volta",
    "United T1800",
    "United",
    "Davigo",
]

BRAND_CANONICAL = {
    "Viar Q1": "Viar",
    "Polytron Fox-R": "Polytron",
    "Fox-R": "Polytron",
    "United T1800": "United",
}

EMOTION_LABELS_ID = {
    Emotion.INTEREST: "minat",
    Emotion.TRUST: "kepercayaan",
    Emotion.FEAR: "ketakutan",
    Emotion.SKEPTICISM: "skeptisisme",
    Emotion.SATISFACTION: "kepuasan",
}
