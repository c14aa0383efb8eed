"""Data models for EVPulse."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any


class Emotion(Enum):
    """Emotion categories in canonical chart order."""
    INTEREST = "interest"
    TRUST = "trust"
    FEAR = "fear"
    SKEPTICISM = "skepticism"
    SATISFACTION = "satisfaction"


class IntentionLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DimensionFamily(Enum):
    """Keyword-scored dimension sets."""
    UTAUT2 = "utaut2"
    MARKETING_MIX = "marketing_mix"
    MARKETING_FUNNEL = "marketing_funnel"
    PSYCHO_SOCIAL = "psycho_social"


@dataclass(frozen=True)
class Document:
    """A consumer-sentiment document owned by the document source."""
    id: int
    content: str
    author: str
    timestamp: int


@dataclass
class DatasetRow:
    """One normalized record from an uploaded CSV/JSON/TXT file."""
    text: str
    id: Optional[str] = None
    date: Optional[str] = None
    region: Optional[str] = None
    source: Optional[str] = None
    user: Optional[str] = None
    aspect_category: Optional[str] = None
    keywords_extracted: Optional[str] = None
    intention_level: Optional[IntentionLevel] = None
    intention_score: Optional[int] = None

    def to_record(self) -> Dict[str, Any]:
        """Render the row with the canonical upload schema keys."""
        return {
            "ID": self.id,
            "Date": self.date,
            "Region": self.region,
            "Source": self.source,
            "User": self.user,
            "text": self.text,
            "Aspect_Category": self.aspect_category,
            "Keywords_Extracted": self.keywords_extracted,
            "intention_level": self.intention_level.value if self.intention_level else None,
            "intention_score": self.intention_score,
        }


@dataclass
class DimensionScore:
    """Score of one document (or document set) on one dimension."""
    dimension: str
    score: int


@dataclass
class IntentionResult:
    score: int
    level: IntentionLevel


@dataclass
class EmotionClassification:
    emotion: Emotion
    brand: Optional[str]


@dataclass
class IntentionDistribution:
    high: int = 0
    medium: int = 0
    low: int = 0

    @property
    def total(self) -> int:
        return self.high + self.medium + self.low

    def as_dict(self) -> Dict[str, int]:
        return {"high": self.high, "medium": self.medium, "low": self.low}


@dataclass
class BrandIntention:
    """Intention level counts for one brand."""
    brand: str
    high: int = 0
    medium: int = 0
    low: int = 0

    @property
    def total(self) -> int:
        return self.high + self.medium + self.low


@dataclass
class BrandEmotion:
    """Emotion counts for one brand."""
    brand: str
    counts: Dict[Emotion, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass
class GenderEmotion:
    """Male/female split for one emotion."""
    emotion: Emotion
    male_count: int
    female_count: int


@dataclass
class LocationEmotionMatrix:
    """Region x emotion document counts."""
    locations: List[str]
    emotions: List[Emotion]
    data: List[List[int]]


@dataclass
class IntentionTrendPoint:
    id: int
    intention_level: IntentionLevel
    trend: int


@dataclass
class TemporalPeriod:
    """Emotion counts for one sequential period (T1, T2, ...)."""
    period: str
    counts: Dict[Emotion, int]


@dataclass
class ParseStats:
    total_rows: int
    field_counts_per_row: List[int]


@dataclass
class RFC4180ParseResult:
    rows: List[List[str]]
    stats: ParseStats


@dataclass
class SampleRow:
    row_index: int
    field_count: int
    fields: List[str]


@dataclass
class ParseDiagnostics:
    """Header and layout details reported back for CSV uploads."""
    normalized_headers: List[str]
    text_index: int
    field_counts_per_row: List[int]
    sample_rows: List[SampleRow]
    recovery_applied_count: int = 0


@dataclass
class ParseResult:
    """Outcome of ingesting one uploaded file."""
    success: bool
    rows: List[DatasetRow] = field(default_factory=list)
    error: Optional[str] = None
    skipped_count: int = 0
    valid_count: int = 0
    diagnostics: Optional[ParseDiagnostics] = None


@dataclass
class StrategicRecommendation:
    title: str
    rationale: str
    priority: str  # "high", "medium" or "low"


@dataclass
class StrategicReport:
    """Executive report derived from the current document set."""
    generated_at: datetime
    locale: str
    document_count: int
    executive_summary: str
    key_findings: List[str]
    recommendations: List[StrategicRecommendation]
    risks: List[str]
    next_steps: List[str]
    data_availability: Dict[str, bool]
