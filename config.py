import os
from dataclasses import dataclass
from datetime import date

from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "Kütüphane CLI")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Hesaplamalar için referans yılı (klasik kitap, zorluk puanı)
    current_year: int = int(os.getenv("LIBRARY_CURRENT_YEAR", str(date.today().year)))

    # Raporlama Ayarları
    default_popular_limit: int = int(os.getenv("DEFAULT_POPULAR_LIMIT", "3"))
    power_reader_threshold: int = int(os.getenv("POWER_READER_THRESHOLD", "2"))


settings = Settings()
