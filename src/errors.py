"""Kütüphane alanı için hata türleri."""


class LibraryError(Exception):
    """Tüm kütüphane hatalarının ortak tabanı."""


class ValidationError(LibraryError, ValueError):
    """Çağıran geçersiz bir argüman sağladı (boş metin, aralık dışı sayı, bilinmeyen veya tekrarlanan kimlik)."""


class StateError(LibraryError, RuntimeError):
    """İstenen işlem nesnenin mevcut durumuyla çelişiyor."""
