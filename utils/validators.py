from typing import Any, Optional

from src.errors import ValidationError


class TextValidator:
    """Zorunlu metin alanları için basit doğrulamalar."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        if text is None or not isinstance(text, str):
            return True
        return not text.strip()

    @staticmethod
    def require_text(text: Optional[str], field_name: str) -> str:
        """Boş olmayan metni kırpılmış haliyle döndür, aksi halde ValidationError."""
        if TextValidator.is_blank(text):
            raise ValidationError(f"{field_name} must not be null or blank")
        return text.strip()


class NumberValidator:
    """Tamsayı alanları için aralık kontrolleri."""

    @staticmethod
    def _require_int(value: Any, field_name: str) -> int:
        # bool, int'in alt sınıfı; True/False sayı olarak kabul edilmez
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{field_name} must be an integer")
        return value

    @staticmethod
    def require_positive(value: Any, field_name: str) -> int:
        value = NumberValidator._require_int(value, field_name)
        if value <= 0:
            raise ValidationError(f"{field_name} must be positive")
        return value

    @staticmethod
    def require_at_least(value: Any, minimum: int, field_name: str) -> int:
        value = NumberValidator._require_int(value, field_name)
        if value < minimum:
            raise ValidationError(f"{field_name} must be >= {minimum}")
        return value
