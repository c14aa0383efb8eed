"""Constants and configuration values for EVPulse."""

# Purchase Intention Constants
class IntentionConstants:
    """Constants for the deterministic purchase-intention scorer."""

    NEUTRAL_SCORE = 50  # score for empty text and unparseable score values
    HASH_MODULUS = 101  # baseline score range 0-100 inclusive
    KEYWORD_STEP = 5  # points per matched keyword

    HIGH_THRESHOLD = 75  # score >= 75 is high
    MEDIUM_THRESHOLD = 55  # 55 <= score < 75 is medium

    POSITIVE_KEYWORDS = [
        'beli', 'buy', 'purchase', 'ingin', 'want', 'suka', 'like', 'bagus', 'good',
        'excellent', 'recommended', 'rekomendasi', 'terbaik', 'best', 'puas', 'satisfied',
        'tertarik', 'interested', 'minat', 'interest', 'akan', 'will', 'segera', 'soon',
    ]

    NEGATIVE_KEYWORDS = [
        'tidak', 'no', 'never', 'jangan', 'buruk', 'bad', 'jelek', 'poor',
        'mahal', 'expensive', 'takut', 'fear', 'ragu', 'doubt', 'skeptis', 'skeptical',
        'kecewa', 'disappointed', 'batal', 'cancel', 'tolak', 'reject',
    ]

    # Indonesian aliases accepted in uploaded intention_level columns
    LEVEL_ALIASES = {
        'low': 'low',
        'rendah': 'low',
        'medium': 'medium',
        'sedang': 'medium',
        'high': 'high',
        'tinggi': 'high',
    }

# Ingestion Constants
class IngestionConstants:
    """Constants for dataset ingestion and schema normalization."""

    SCHEMA = "ID,Date,Region,Source,User,text,Aspect_Category,Keywords_Extracted"

    # normalized header -> DatasetRow attribute
    FIELD_MAP = {
        'id': 'id',
        'date': 'date',
        'region': 'region',
        'source': 'source',
        'user': 'user',
        'aspectcategory': 'aspect_category',
        'keywordsextracted': 'keywords_extracted',
    }

    TEXT_KEY = 'text'
    INTENTION_LEVEL_KEY = 'intentionlevel'
    INTENTION_SCORE_KEY = 'intentionscore'

    # Text recovery for misaligned columns
    SUSPICIOUS_TOKENS = ['positive', 'negative', 'neutral', 'high', 'medium', 'low']
    MIN_TEXT_LENGTH = 10  # shorter text cells are treated as suspicious
    MIN_CANDIDATE_LENGTH = 20  # minimum length of a recovered sentence
    MAX_PREVIEW_FIELDS = 8  # fields kept per diagnostics sample row

    SUPPORTED_EXTENSIONS = ('csv', 'json', 'txt')

# Aggregation Constants
class AggregationConstants:
    """Constants for aggregation and chart data."""

    MALE_LABEL = 'Pria'
    FEMALE_LABEL = 'Wanita'

    # Whitelist of Indonesian regions accepted in the location breakdown
    VALID_REGIONS = [
        'Jakarta',
        'Jawa Barat',
        'Jawa Tengah',
        'Jawa Timur',
        'Bali',
        'Sumatera Utara',
        'Sumatera Selatan',
        'Sumatera Barat',
        'Kalimantan Timur',
        'Kalimantan Selatan',
        'Kalimantan Barat',
        'Sulawesi Selatan',
        'Sulawesi Utara',
        'Papua',
        'Maluku',
        'Nusa Tenggara',
        'North Java',
        'South Kalimantan',
    ]

# Report Constants
class ReportConstants:
    """Constants for strategic report generation."""

    MAX_RECOMMENDATIONS = 5
    MIN_RECOMMENDATIONS = 3
    NEGATIVE_SHARE_RISK = 20  # percent of fear/skepticism that triggers a risk
    LOW_SCORE_THRESHOLD = 50  # dimension or funnel score considered a gap
    TOP_EMOTIONS = 5

# Logging Constants
class LoggingConstants:
    """Constants for log output."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
