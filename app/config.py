# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Business limits
_MAX_PAYMENT_AMOUNT = float(os.getenv("MAX_PAYMENT_AMOUNT", "10000000"))
_MIN_PASSWORD_LENGTH = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))

# Localization
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "ar")

# Logging
_LOGS_DIR = os.getenv("LOGS_DIR", None)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() in ("1", "true", "yes")

_PROJECT_ROOT = Path(__file__).parent.parent

_MB = 1024 * 1024


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Aqarat"
    APP_TITLE: str = "Property Management Back-Office"
    APP_TITLE_AR: str = "نظام إدارة العقارات"
    VERSION: str = "1.0.0"

    # Localization
    DEFAULT_LANGUAGE: str = _APP_LANGUAGE

    # Payment limits
    # Ceiling is a business constant; overridable through .env
    MAX_PAYMENT_AMOUNT: float = _MAX_PAYMENT_AMOUNT
    MAX_LATE_FEE: float = 100000
    MAX_NOTES_LENGTH: int = 1000

    # Account rules
    MIN_PASSWORD_LENGTH: int = _MIN_PASSWORD_LENGTH

    # Building / Unit limits
    MAX_BUILDING_UNITS: int = 1000
    MAX_BUILDING_FLOORS: int = 200
    MAX_PARKING_SPACES: int = 10000
    MAX_UNIT_AREA: float = 100000
    MAX_UNIT_PRICE: float = 1000000000
    MAX_UNIT_BATHROOMS: int = 50
    MAX_UNIT_BEDROOMS: int = 50

    # Attachments
    MAX_IMAGE_SIZE: int = 5 * _MB
    MAX_DOCUMENT_SIZE: int = 10 * _MB
    IMAGE_TYPES: tuple = ("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp")
    PDF_TYPES: tuple = ("application/pdf",)
    DOCUMENT_TYPES: tuple = (
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else _PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * _MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_TO_FILE: bool = _LOG_TO_FILE

    # Date Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"


# Controlled vocabularies
class Vocabularies:
    # Value (API string), Name (English), Name (Arabic)
    COMPANY_TYPES = [
        ("owner", "Owner", "مالك"),
        ("agency", "Real Estate Agency", "شركة عقارية"),
    ]

    BUILDING_TYPES = [
        ("residential", "Residential", "سكني"),
        ("commercial", "Commercial", "تجاري"),
        ("mixed", "Mixed Use", "سكني وتجاري"),
    ]

    UNIT_TYPES = [
        ("studio", "Studio", "ستوديو"),
        ("apartment", "Apartment", "شقة"),
        ("shop", "Shop", "محل تجاري"),
        ("office", "Office", "مكتب"),
        ("villa", "Villa", "فيلا"),
        ("room", "Room", "غرفة"),
    ]

    UNIT_LAYOUTS = [
        ("studio", "Studio", "ستوديو"),
        ("1bhk", "1 BHK", "1bhk"),
        ("2bhk", "2 BHK", "2bhk"),
        ("3bhk", "3 BHK", "3bhk"),
        ("4bhk", "4 BHK", "4bhk"),
        ("5bhk", "5 BHK", "5bhk"),
        ("6bhk", "6 BHK", "6bhk"),
        ("7bhk", "7 BHK", "7bhk"),
        ("other", "Other", "أخرى"),
    ]

    UNIT_STATUS = [
        ("available", "Available", "متاح"),
        ("rented", "Rented", "مؤجر"),
        ("maintenance", "Under Maintenance", "تحت الصيانة"),
    ]

    TENANT_TYPES = [
        ("person", "Individual", "فرد"),
        ("commercial_register", "Commercial Register", "سجل تجاري"),
        ("partnership", "Partnership", "شراكة/اتفاقية"),
        ("embassy", "Embassy", "سفارة"),
        ("foreign_company", "Foreign Company", "شركة أجنبية"),
        ("government", "Government Entity", "جهة حكومية"),
        ("inheritance", "Heirs", "ورثة"),
        ("civil_registry", "Civil Registry", "سجل مدني"),
    ]

    # Tenant types that must provide a commercial register document
    COMMERCIAL_TENANT_TYPES = ("commercial_register", "partnership", "foreign_company")

    CONTRACT_TYPES = [
        ("residential", "Residential", "سكني"),
        ("commercial", "Commercial", "تجاري"),
    ]

    # Canonical payment method values. Legacy screens used "checks" for
    # reservations; "check" is the only accepted spelling.
    PAYMENT_METHODS = [
        ("cash", "Cash", "نقدًا"),
        ("check", "Check", "شيك"),
        ("bank_transfer", "Bank Transfer", "تحويل بنكي"),
        ("credit_card", "Credit Card", "بطاقة ائتمان"),
        ("online", "Online", "دفع إلكتروني"),
    ]

    RESERVATION_PAYMENT_METHODS = ("cash", "check")

    PAYMENT_STATUS = [
        ("pending", "Pending", "معلق"),
        ("paid", "Paid", "مدفوع"),
        ("delayed", "Delayed", "متأخر"),
        ("cancelled", "Cancelled", "ملغي"),
    ]

    PAYMENT_SCHEDULES = [
        ("monthly", "Monthly", "شهري"),
        ("quarterly", "Quarterly", "ربع سنوي"),
        ("triannual", "Every 4 months", "كل 4 أشهر"),
        ("biannual", "Biannual", "نصف سنوي"),
        ("annual", "Annual", "سنوي"),
    ]

    SERVICE_TYPES = [
        ("maintenance", "Maintenance", "صيانة"),
        ("financial", "Financial", "مالية"),
        ("administrative", "Administrative", "إدارية"),
    ]

    SERVICE_SUBTYPES = {
        "maintenance": [
            ("plumbing", "Plumbing", "السباكة"),
            ("electrical", "Electrical", "الكهرباء"),
            ("ac", "Air Conditioning", "تكييف الهواء"),
            ("appliance", "Appliances", "الأجهزة المنزلية"),
            ("structural", "Structural", "الإصلاحات الهيكلية"),
            ("painting", "Painting", "الطلاء"),
            ("doors_windows", "Doors & Windows", "الأبواب والنوافذ"),
            ("flooring", "Flooring", "الأرضيات"),
            ("carpentry", "Carpentry", "النجارة"),
            ("cleaning", "Cleaning", "التنظيف"),
            ("pest_control", "Pest Control", "مكافحة الحشرات"),
            ("other", "Other", "أخرى"),
        ],
        "financial": [
            ("payment_issue", "Payment Issue", "مشكلة في الدفع"),
            ("contract_renewal", "Contract Renewal", "تجديد العقد"),
            ("deposit_refund", "Deposit Refund", "استرداد التأمين"),
            ("payment_schedule", "Payment Schedule", "جدول الدفع"),
            ("invoice_request", "Invoice Request", "طلب فاتورة"),
            ("other", "Other", "أخرى"),
        ],
        "administrative": [
            ("contract_change", "Contract Change", "تغيير العقد"),
            ("tenant_info_update", "Tenant Info Update", "تحديث معلومات المستأجر"),
            ("complaint", "Complaint", "شكوى"),
            ("neighbor_issue", "Neighbor Issue", "مشكلة مع الجيران"),
            ("permission_request", "Permission Request", "طلب إذن"),
            ("early_termination", "Early Termination", "إنهاء مبكر للعقد"),
            ("other", "Other", "أخرى"),
        ],
    }

    @staticmethod
    def values(vocabulary) -> tuple:
        """Return the accepted values of a (value, en, ar) vocabulary."""
        return tuple(item[0] for item in vocabulary)

    @classmethod
    def get_display_name(cls, vocabulary, value: str, arabic: bool = False) -> str:
        for code, name_en, name_ar in vocabulary:
            if code == value:
                return name_ar if arabic else name_en
        return value
