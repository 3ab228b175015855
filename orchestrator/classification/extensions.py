"""Extension lookup for files no other stage claimed."""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from ..core.types import FileNode
from .categories import Category, ClassificationResult


class ExtensionRule(NamedTuple):
    category: Category
    reason: str


EXTENSION_RULES: Mapping[str, ExtensionRule] = MappingProxyType(
    {
        # Documents
        ".pdf": ExtensionRule(Category.DOC_PDF, "PDF Document"),
        ".docx": ExtensionRule(Category.DOC_OFFICE, "Word Document"),
        ".doc": ExtensionRule(Category.DOC_OFFICE, "Word Document"),
        ".xlsx": ExtensionRule(Category.DOC_OFFICE, "Excel Spreadsheet"),
        ".xls": ExtensionRule(Category.DOC_OFFICE, "Excel Spreadsheet"),
        ".pptx": ExtensionRule(Category.DOC_OFFICE, "PowerPoint"),
        ".txt": ExtensionRule(Category.DOC_TEXT, "Text File"),
        ".md": ExtensionRule(Category.DOC_TEXT, "Markdown"),
        # Video
        ".mp4": ExtensionRule(Category.MEDIA_VIDEO, "Video File"),
        ".avi": ExtensionRule(Category.MEDIA_VIDEO, "Video File"),
        ".mkv": ExtensionRule(Category.MEDIA_VIDEO, "Video File"),
        ".mov": ExtensionRule(Category.MEDIA_VIDEO, "Video File"),
        ".wmv": ExtensionRule(Category.MEDIA_VIDEO, "Video File"),
        # Audio
        ".mp3": ExtensionRule(Category.MEDIA_AUDIO, "Audio File"),
        ".wav": ExtensionRule(Category.MEDIA_AUDIO, "Audio File"),
        ".flac": ExtensionRule(Category.MEDIA_AUDIO, "Audio File"),
        ".m4a": ExtensionRule(Category.MEDIA_AUDIO, "Audio File"),
        ".ogg": ExtensionRule(Category.MEDIA_AUDIO, "Audio File"),
        # Images
        ".jpg": ExtensionRule(Category.MEDIA_IMAGE, "Image File"),
        ".jpeg": ExtensionRule(Category.MEDIA_IMAGE, "Image File"),
        ".png": ExtensionRule(Category.MEDIA_IMAGE, "Image File"),
        ".gif": ExtensionRule(Category.MEDIA_IMAGE, "Image File"),
        ".bmp": ExtensionRule(Category.MEDIA_IMAGE, "Image File"),
        ".svg": ExtensionRule(Category.MEDIA_IMAGE, "Vector Image"),
        ".webp": ExtensionRule(Category.MEDIA_IMAGE, "Image File"),
        # Archives
        ".zip": ExtensionRule(Category.ARCHIVE_COMPRESSED, "Archive"),
        ".rar": ExtensionRule(Category.ARCHIVE_COMPRESSED, "Archive"),
        ".7z": ExtensionRule(Category.ARCHIVE_COMPRESSED, "Archive"),
        ".tar": ExtensionRule(Category.ARCHIVE_COMPRESSED, "Archive"),
        ".gz": ExtensionRule(Category.ARCHIVE_COMPRESSED, "Archive"),
        # Executables
        ".exe": ExtensionRule(Category.TOOL_EXECUTABLE, "Executable"),
        ".msi": ExtensionRule(Category.TOOL_EXECUTABLE, "Installer"),
        ".app": ExtensionRule(Category.TOOL_EXECUTABLE, "Application"),
        ".dmg": ExtensionRule(Category.TOOL_EXECUTABLE, "Disk Image"),
    }
)


def match_extension(node: FileNode) -> Optional[ClassificationResult]:
    """Classify a file by its lowercased final extension."""
    if not node.is_file:
        return None

    extension = node.extension
    if extension is None:
        return None

    rule = EXTENSION_RULES.get(extension)
    if rule is None:
        return None
    return ClassificationResult.for_category(rule.category, rule.reason)
