"""Классификация файлов по расширению.

Таблица определяет MIME-тип, категорию, тип ресурса для хранилища
(``raw``, ``image`` или ``auto``), возможность предпросмотра и иконку.
Все функции чистые и никогда не выбрасывают исключений.
"""
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_RESOURCE_TYPE = "auto"
DEFAULT_ICON = "fas fa-file"


@dataclass(frozen=True)
class FileTypeInfo:
    extension: str
    category: str
    mime_type: str
    resource_type: str
    can_preview: bool
    icon: str

    @property
    def is_supported(self) -> bool:
        return self.category != "unknown"

    def to_dict(self) -> dict:
        return asdict(self)


def _document(ext: str, mime_type: str, icon: str, can_preview: bool) -> FileTypeInfo:
    return FileTypeInfo(ext, "document", mime_type, "raw", can_preview, icon)


def _image(ext: str, mime_type: str) -> FileTypeInfo:
    return FileTypeInfo(ext, "image", mime_type, "image", True, "fas fa-file-image")


SUPPORTED_FILE_TYPES: Dict[str, FileTypeInfo] = {
    info.extension: info
    for info in (
        _document("pdf", "application/pdf", "fas fa-file-pdf", True),
        _document("doc", "application/msword", "fas fa-file-word", False),
        _document(
            "docx",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "fas fa-file-word",
            False,
        ),
        _document("txt", "text/plain", "fas fa-file-alt", True),
        _image("jpg", "image/jpeg"),
        _image("jpeg", "image/jpeg"),
        _image("png", "image/png"),
        _image("gif", "image/gif"),
        _image("bmp", "image/bmp"),
        _image("svg", "image/svg+xml"),
        _image("webp", "image/webp"),
    )
}


def extract_extension(filename: Optional[str]) -> str:
    """Расширение после последней точки в нижнем регистре"""
    if not filename:
        return ""
    parts = filename.split(".")
    return parts[-1].lower() if len(parts) > 1 else ""


def get_file_type_info(extension: Optional[str]) -> Optional[FileTypeInfo]:
    if not extension:
        return None
    return SUPPORTED_FILE_TYPES.get(extension.lower())


def classify(filename: Optional[str]) -> FileTypeInfo:
    """Классификация файла по имени"""
    extension = extract_extension(filename)
    info = get_file_type_info(extension)
    if info:
        return info
    return FileTypeInfo(
        extension=extension,
        category="unknown",
        mime_type=DEFAULT_MIME_TYPE,
        resource_type=DEFAULT_RESOURCE_TYPE,
        can_preview=False,
        icon=DEFAULT_ICON,
    )


def is_supported(extension: Optional[str]) -> bool:
    return get_file_type_info(extension) is not None


def get_mime_type(extension: Optional[str]) -> str:
    info = get_file_type_info(extension)
    return info.mime_type if info else DEFAULT_MIME_TYPE


def get_resource_type(extension: Optional[str]) -> str:
    info = get_file_type_info(extension)
    return info.resource_type if info else DEFAULT_RESOURCE_TYPE


def supported_extensions() -> List[str]:
    return list(SUPPORTED_FILE_TYPES)


def validate_file_type(filename: Optional[str]) -> dict:
    extension = extract_extension(filename)
    return {
        "is_valid": is_supported(extension),
        "extension": extension,
        "supported_types": supported_extensions(),
    }


def content_types() -> Dict[str, str]:
    """Таблица расширение -> MIME для заголовков скачивания"""
    return {ext: info.mime_type for ext, info in SUPPORTED_FILE_TYPES.items()}
