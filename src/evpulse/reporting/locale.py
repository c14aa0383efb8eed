"""Bilingual (English/Indonesian) labels and text templates for the strategic report."""

from typing import Dict

from ..core.classifier import normalize_emotion_label
from ..core.lexicon import EMOTION_LABELS_ID

SUPPORTED_LOCALES = ("en", "id")

EN_LABELS = {
    "page_title": "Strategic Recommendation Report",
    "page_description": "Executive-ready insights and actionable recommendations for decision-makers",
    "copy_markdown": "Copy as Markdown",
    "report_metadata": "Report Metadata",
    "generated_on": "Generated on",
    "documents_analyzed": "Documents Analyzed",
    "executive_summary": "Executive Summary",
    "key_findings": "Key Findings",
    "strategic_recommendations": "Strategic Recommendations",
    "recommendations_description": "Actionable recommendations prioritized by impact and urgency",
    "risks_watchouts": "Risks & Watchouts",
    "next_steps": "Next Steps",
    "no_data_title": "No Data Available",
    "no_data_description": "There is no data to generate a strategic report. Please upload documents to the system first.",
    "purchase_intention_notice": "Note: Purchase Intention Data Not Available",
    "purchase_intention_notice_description": (
        "This report is based on emotion and sentiment analysis. Purchase intention metrics are not included "
        "in the current analysis. For more comprehensive insights, consider enabling purchase intention tracking."
    ),
    "priority": "Priority",
    "priority_high": "HIGH",
    "priority_medium": "MEDIUM",
    "priority_low": "LOW",
    "language_label": "Language",
    "footer": "This report was generated using lexicon-based sentiment analysis and strategic insights.",
}

ID_LABELS = {
    "page_title": "Laporan Rekomendasi Strategis",
    "page_description": "Wawasan siap eksekutif dan rekomendasi yang dapat ditindaklanjuti untuk pengambil keputusan",
    "copy_markdown": "Salin sebagai Markdown",
    "report_metadata": "Metadata Laporan",
    "generated_on": "Dibuat pada",
    "documents_analyzed": "Dokumen Dianalisis",
    "executive_summary": "Ringkasan Eksekutif",
    "key_findings": "Temuan Utama",
    "strategic_recommendations": "Rekomendasi Strategis",
    "recommendations_description": "Rekomendasi yang dapat ditindaklanjuti diprioritaskan berdasarkan dampak dan urgensi",
    "risks_watchouts": "Risiko & Perhatian",
    "next_steps": "Langkah Selanjutnya",
    "no_data_title": "Tidak Ada Data Tersedia",
    "no_data_description": "Tidak ada data untuk menghasilkan laporan strategis. Silakan unggah dokumen ke sistem terlebih dahulu.",
    "purchase_intention_notice": "Catatan: Data Niat Pembelian Tidak Tersedia",
    "purchase_intention_notice_description": (
        "Laporan ini didasarkan pada analisis emosi dan sentimen. Metrik niat pembelian tidak termasuk dalam "
        "analisis saat ini. Untuk wawasan yang lebih komprehensif, pertimbangkan untuk mengaktifkan pelacakan "
        "niat pembelian."
    ),
    "priority": "Prioritas",
    "priority_high": "TINGGI",
    "priority_medium": "SEDANG",
    "priority_low": "RENDAH",
    "language_label": "Bahasa",
    "footer": "Laporan ini dibuat menggunakan analisis sentimen berbasis leksikon dan wawasan strategis.",
}

# Templates use str.format placeholders; recommendation entries pair a title
# with a rationale template.
EN_TEMPLATES = {
    "executive_summary": (
        "Analysis of {doc_count} consumer sentiment documents reveals {dominant_emotion} as the dominant "
        "emotional response to electric motorcycle brands. This report identifies {rec_count} strategic "
        "recommendations, including {high_priority_count} high-priority actions, to optimize market positioning "
        "and accelerate adoption. Key opportunities exist in addressing consumer concerns, strengthening "
        "marketing effectiveness, and leveraging positive sentiment for growth."
    ),
    "mixed_emotion": "mixed",
    "analyzed_documents": "Analyzed {count} consumer sentiment documents across electric motorcycle brands.",
    "dominant_emotions": "Dominant emotions: {emotions}.",
    "key_constructs": "Key UTAUT2 constructs: {factors}.",
    "marketing_funnel": (
        "Marketing funnel: Strongest at {strongest} ({strongest_score}/100), "
        "weakest at {weakest} ({weakest_score}/100)."
    ),
    "address_concerns": {
        "title": "Address Consumer Concerns Through Transparency",
        "rationale": (
            "{percentage}% of sentiment shows {emotion}, indicating significant consumer hesitation. Implement "
            "trust-building campaigns focusing on safety certifications, warranty programs, and real customer "
            "testimonials to reduce anxiety."
        ),
    },
    "capitalize_positive": {
        "title": "Capitalize on Positive Sentiment with Conversion Campaigns",
        "rationale": (
            "{percentage}% of sentiment reflects {emotion}, showing strong market receptivity. Launch targeted "
            "conversion campaigns with limited-time offers and test-ride programs to convert interest into purchases."
        ),
    },
    "leverage_trust": {
        "title": "Leverage Trust for Brand Advocacy Programs",
        "rationale": (
            "{percentage}% of sentiment demonstrates trust, a valuable asset. Develop referral programs and brand "
            "ambassador initiatives to amplify positive word-of-mouth and expand market reach."
        ),
    },
    "increase_brand_visibility": {
        "title": "Increase Brand Visibility Through Multi-Channel Campaigns",
        "rationale": (
            "Awareness scores at {score}/100 indicate low brand recognition. Invest in digital advertising, "
            "influencer partnerships, and public events to increase top-of-mind awareness among target demographics."
        ),
    },
    "strengthen_product_info": {
        "title": "Strengthen Product Information and Comparison Tools",
        "rationale": (
            "Consideration scores at {score}/100 suggest consumers need more information. Develop detailed "
            "comparison guides, interactive product configurators, and educational content to support decision-making."
        ),
    },
    "implement_incentives": {
        "title": "Implement Purchase Incentive Programs",
        "rationale": (
            "Intent scores at {score}/100 reveal a conversion gap. Introduce financing options, trade-in programs, "
            "and early-adopter discounts to lower purchase barriers and accelerate decision-making."
        ),
    },
    "build_community": {
        "title": "Build Community and Loyalty Programs",
        "rationale": (
            "Advocacy scores at {score}/100 indicate limited word-of-mouth. Create owner communities, loyalty "
            "rewards, and referral incentives to transform satisfied customers into brand advocates."
        ),
    },
    "amplify_social_proof": {
        "title": "Amplify Social Proof and Community Engagement",
        "rationale": (
            "Strong Social Influence (SI) signals ({score}/100) show peer recommendations matter. Showcase "
            "user-generated content, customer reviews, and community events to leverage social validation."
        ),
    },
    "simplify_ux": {
        "title": "Simplify User Experience and Onboarding",
        "rationale": (
            "Effort Expectancy (EE) scores ({score}/100) suggest consumers perceive complexity. Provide "
            "comprehensive tutorials, intuitive interfaces, and hands-on training sessions to boost user confidence."
        ),
    },
    "address_price_value": {
        "title": "Improve Price-Value Perception",
        "rationale": (
            "Price Value (PV) scores ({score}/100) indicate cost concerns. Communicate total cost of ownership "
            "benefits, financing options, and long-term savings to improve perceived value."
        ),
    },
    "improve_facilitating": {
        "title": "Strengthen Infrastructure and Support Systems",
        "rationale": (
            "Facilitating Conditions (FC) scores ({score}/100) reveal infrastructure concerns. Expand charging "
            "networks, service centers, and technical support to reduce adoption barriers."
        ),
    },
    "enhance_experience": {
        "title": "Enhance User Experience and Enjoyment",
        "rationale": (
            "Hedonic Motivation (HM) scores ({score}/100) suggest limited enjoyment. Focus on design aesthetics, "
            "driving experience, and lifestyle branding to increase emotional appeal."
        ),
    },
    "focus_marketing": {
        "title": "Focus Marketing Resources on High-Engagement Brands",
        "rationale": (
            "{brand} dominates conversation with {mentions} mentions. Allocate marketing budget proportionally to "
            "high-engagement brands while investigating why others receive less attention."
        ),
    },
    "expand_data_collection": {
        "title": "Expand Data Collection for Deeper Insights",
        "rationale": (
            "Current dataset provides limited signals. Implement systematic feedback collection across customer "
            "touchpoints to enable more granular strategic analysis and targeted interventions."
        ),
    },
    "high_negative_sentiment": (
        "High negative sentiment ({emotion}: {percentage}%) may slow adoption rates if not addressed promptly."
    ),
    "low_utaut2_score": (
        "Low {dimension} scores ({score}/100) indicate significant barriers to technology acceptance and adoption."
    ),
    "critical_gap": "Critical gap in {metric} ({score}/100) may limit market penetration and revenue growth.",
    "limited_dataset": (
        "Limited dataset size may not capture full market sentiment. Expand data collection to validate findings."
    ),
    "next_steps": [
        "Present findings to marketing and product teams for strategic alignment.",
        "Develop detailed action plans for each high-priority recommendation with timelines and KPIs.",
        "Establish monitoring dashboard to track sentiment changes and campaign effectiveness.",
        "Schedule quarterly reviews to reassess strategy based on updated market data.",
        "Allocate budget and resources to address identified gaps in the marketing funnel.",
    ],
    "no_data_summary": "No data available for analysis. Upload documents to generate strategic recommendations.",
}

ID_TEMPLATES = {
    "executive_summary": (
        "Analisis {doc_count} dokumen sentimen konsumen mengungkapkan {dominant_emotion} sebagai respons "
        "emosional dominan terhadap merek sepeda motor listrik. Laporan ini mengidentifikasi {rec_count} "
        "rekomendasi strategis, termasuk {high_priority_count} tindakan prioritas tinggi, untuk mengoptimalkan "
        "posisi pasar dan mempercepat adopsi. Peluang utama ada dalam mengatasi kekhawatiran konsumen, "
        "memperkuat efektivitas pemasaran, dan memanfaatkan sentimen positif untuk pertumbuhan."
    ),
    "mixed_emotion": "campuran",
    "analyzed_documents": "Menganalisis {count} dokumen sentimen konsumen di berbagai merek sepeda motor listrik.",
    "dominant_emotions": "Emosi dominan: {emotions}.",
    "key_constructs": "Konstruk UTAUT2 utama: {factors}.",
    "marketing_funnel": (
        "Corong pemasaran: Terkuat pada {strongest} ({strongest_score}/100), "
        "terlemah pada {weakest} ({weakest_score}/100)."
    ),
    "address_concerns": {
        "title": "Atasi Kekhawatiran Konsumen Melalui Transparansi",
        "rationale": (
            "{percentage}% sentimen menunjukkan {emotion}, mengindikasikan keraguan konsumen yang signifikan. "
            "Terapkan kampanye membangun kepercayaan yang berfokus pada sertifikasi keamanan, program garansi, "
            "dan testimoni pelanggan nyata untuk mengurangi kecemasan."
        ),
    },
    "capitalize_positive": {
        "title": "Manfaatkan Sentimen Positif dengan Kampanye Konversi",
        "rationale": (
            "{percentage}% sentimen mencerminkan {emotion}, menunjukkan penerimaan pasar yang kuat. Luncurkan "
            "kampanye konversi yang ditargetkan dengan penawaran terbatas dan program uji coba untuk mengubah "
            "minat menjadi pembelian."
        ),
    },
    "leverage_trust": {
        "title": "Manfaatkan Kepercayaan untuk Program Advokasi Merek",
        "rationale": (
            "{percentage}% sentimen menunjukkan kepercayaan, aset yang berharga. Kembangkan program rujukan dan "
            "inisiatif duta merek untuk memperkuat word-of-mouth positif dan memperluas jangkauan pasar."
        ),
    },
    "increase_brand_visibility": {
        "title": "Tingkatkan Visibilitas Merek Melalui Kampanye Multi-Saluran",
        "rationale": (
            "Skor kesadaran pada {score}/100 menunjukkan pengenalan merek yang rendah. Investasikan dalam iklan "
            "digital, kemitraan influencer, dan acara publik untuk meningkatkan kesadaran top-of-mind di antara "
            "demografi target."
        ),
    },
    "strengthen_product_info": {
        "title": "Perkuat Informasi Produk dan Alat Perbandingan",
        "rationale": (
            "Skor pertimbangan pada {score}/100 menunjukkan konsumen membutuhkan lebih banyak informasi. "
            "Kembangkan panduan perbandingan terperinci, konfigurator produk interaktif, dan konten edukatif "
            "untuk mendukung pengambilan keputusan."
        ),
    },
    "implement_incentives": {
        "title": "Terapkan Program Insentif Pembelian",
        "rationale": (
            "Skor niat pada {score}/100 mengungkapkan kesenjangan konversi. Perkenalkan opsi pembiayaan, program "
            "tukar tambah, dan diskon early-adopter untuk menurunkan hambatan pembelian dan mempercepat "
            "pengambilan keputusan."
        ),
    },
    "build_community": {
        "title": "Bangun Komunitas dan Program Loyalitas",
        "rationale": (
            "Skor advokasi pada {score}/100 menunjukkan word-of-mouth yang terbatas. Ciptakan komunitas pemilik, "
            "hadiah loyalitas, dan insentif rujukan untuk mengubah pelanggan yang puas menjadi advokat merek."
        ),
    },
    "amplify_social_proof": {
        "title": "Perkuat Bukti Sosial dan Keterlibatan Komunitas",
        "rationale": (
            "Sinyal Pengaruh Sosial (SI) yang kuat ({score}/100) menunjukkan rekomendasi rekan penting. Tampilkan "
            "konten yang dibuat pengguna, ulasan pelanggan, dan acara komunitas untuk memanfaatkan validasi sosial."
        ),
    },
    "simplify_ux": {
        "title": "Sederhanakan Pengalaman Pengguna dan Onboarding",
        "rationale": (
            "Skor Harapan Usaha (EE) ({score}/100) menunjukkan konsumen melihat kompleksitas. Sediakan tutorial "
            "komprehensif, antarmuka intuitif, dan sesi pelatihan langsung untuk meningkatkan kepercayaan pengguna."
        ),
    },
    "address_price_value": {
        "title": "Tingkatkan Persepsi Nilai Harga",
        "rationale": (
            "Skor Nilai Harga (PV) ({score}/100) menunjukkan kekhawatiran biaya. Komunikasikan manfaat total biaya "
            "kepemilikan, opsi pembiayaan, dan penghematan jangka panjang untuk meningkatkan nilai yang dirasakan."
        ),
    },
    "improve_facilitating": {
        "title": "Perkuat Infrastruktur dan Sistem Dukungan",
        "rationale": (
            "Skor Kondisi Pendukung (FC) ({score}/100) mengungkapkan kekhawatiran infrastruktur. Perluas jaringan "
            "pengisian daya, pusat layanan, dan dukungan teknis untuk mengurangi hambatan adopsi."
        ),
    },
    "enhance_experience": {
        "title": "Tingkatkan Pengalaman dan Kesenangan Pengguna",
        "rationale": (
            "Skor Motivasi Hedonis (HM) ({score}/100) menunjukkan kesenangan terbatas. Fokus pada estetika desain, "
            "pengalaman berkendara, dan branding gaya hidup untuk meningkatkan daya tarik emosional."
        ),
    },
    "focus_marketing": {
        "title": "Fokuskan Sumber Daya Pemasaran pada Merek dengan Keterlibatan Tinggi",
        "rationale": (
            "{brand} mendominasi percakapan dengan {mentions} penyebutan. Alokasikan anggaran pemasaran secara "
            "proporsional ke merek dengan keterlibatan tinggi sambil menyelidiki mengapa yang lain menerima "
            "perhatian lebih sedikit."
        ),
    },
    "expand_data_collection": {
        "title": "Perluas Pengumpulan Data untuk Wawasan yang Lebih Dalam",
        "rationale": (
            "Dataset saat ini memberikan sinyal terbatas. Terapkan pengumpulan umpan balik sistematis di seluruh "
            "titik sentuh pelanggan untuk memungkinkan analisis strategis yang lebih granular dan intervensi yang "
            "ditargetkan."
        ),
    },
    "high_negative_sentiment": (
        "Sentimen negatif yang tinggi ({emotion}: {percentage}%) dapat memperlambat tingkat adopsi jika tidak "
        "segera ditangani."
    ),
    "low_utaut2_score": (
        "Skor {dimension} yang rendah ({score}/100) menunjukkan hambatan signifikan untuk penerimaan dan adopsi "
        "teknologi."
    ),
    "critical_gap": (
        "Kesenjangan kritis dalam {metric} ({score}/100) dapat membatasi penetrasi pasar dan pertumbuhan pendapatan."
    ),
    "limited_dataset": (
        "Ukuran dataset terbatas mungkin tidak menangkap sentimen pasar penuh. Perluas pengumpulan data untuk "
        "memvalidasi temuan."
    ),
    "next_steps": [
        "Presentasikan temuan kepada tim pemasaran dan produk untuk penyelarasan strategis.",
        "Kembangkan rencana aksi terperinci untuk setiap rekomendasi prioritas tinggi dengan timeline dan KPI.",
        "Buat dashboard pemantauan untuk melacak perubahan sentimen dan efektivitas kampanye.",
        "Jadwalkan tinjauan triwulanan untuk menilai kembali strategi berdasarkan data pasar yang diperbarui.",
        "Alokasikan anggaran dan sumber daya untuk mengatasi kesenjangan yang teridentifikasi dalam corong pemasaran.",
    ],
    "no_data_summary": "Tidak ada data tersedia untuk analisis. Unggah dokumen untuk menghasilkan rekomendasi strategis.",
}


def normalize_locale(locale: str) -> str:
    """Anything other than Indonesian falls back to English."""
    return "id" if (locale or "").strip().lower() == "id" else "en"


def get_ui_labels(locale: str) -> Dict[str, str]:
    return ID_LABELS if normalize_locale(locale) == "id" else EN_LABELS


def get_priority_label(priority: str, locale: str) -> str:
    return get_ui_labels(locale)[f"priority_{priority}"]


def get_report_templates(locale: str) -> Dict:
    return ID_TEMPLATES if normalize_locale(locale) == "id" else EN_TEMPLATES


def translate_emotion(emotion: str, locale: str) -> str:
    """Emotion name in the locale; unknown labels are returned unchanged."""
    resolved = normalize_emotion_label(emotion)
    if resolved is None:
        return emotion
    return EMOTION_LABELS_ID[resolved] if normalize_locale(locale) == "id" else resolved.value
