"""
Category table for the organization taxonomy.

Maps every category to the destination root it is moved to and an
informational priority weight. Conflicts between rules are resolved by rule
order in the engine, never by priority.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Union

from pydantic import BaseModel, ConfigDict

VACUUM_TARGET = "VACUUM"


class Category(str, Enum):
    """Closed set of classification categories."""

    # Project types
    PROJECT_GIT = "PROJECT_GIT"
    PROJECT_NODE = "PROJECT_NODE"
    PROJECT_PYTHON = "PROJECT_PYTHON"
    PROJECT_UNITY = "PROJECT_UNITY"
    PROJECT_RUST = "PROJECT_RUST"
    PROJECT_GO = "PROJECT_GO"
    PROJECT_JAVA = "PROJECT_JAVA"

    # Documents
    DOC_PDF = "DOC_PDF"
    DOC_OFFICE = "DOC_OFFICE"
    DOC_TEXT = "DOC_TEXT"

    # Media
    MEDIA_VIDEO = "MEDIA_VIDEO"
    MEDIA_AUDIO = "MEDIA_AUDIO"
    MEDIA_IMAGE = "MEDIA_IMAGE"

    ARCHIVE_COMPRESSED = "ARCHIVE_COMPRESSED"

    # Development
    SDK_DOTNET = "SDK_DOTNET"
    CONFIG_DOTFILE = "CONFIG_DOTFILE"
    TOOL_EXECUTABLE = "TOOL_EXECUTABLE"

    # Private/sensitive
    PRIVATE_FINANCIAL = "PRIVATE_FINANCIAL"
    PRIVATE_LEGAL = "PRIVATE_LEGAL"
    PRIVATE_MEDICAL = "PRIVATE_MEDICAL"
    PRIVATE_IDENTITY = "PRIVATE_IDENTITY"

    # Cleanup
    VACUUM_EMPTY = "VACUUM_EMPTY"
    VACUUM_TEMP = "VACUUM_TEMP"
    ARCHIVE_STALE = "ARCHIVE_STALE"


class CategoryConfig(NamedTuple):
    """Destination and weight of a category."""

    target_path: str
    priority: int


CATEGORY_TABLE: Mapping[Category, CategoryConfig] = MappingProxyType(
    {
        Category.PROJECT_GIT: CategoryConfig("01_Build/Projects", 10),
        Category.PROJECT_NODE: CategoryConfig("01_Build/Web", 10),
        Category.PROJECT_PYTHON: CategoryConfig("01_Build/Data", 10),
        Category.PROJECT_UNITY: CategoryConfig("01_Build/Interactive", 10),
        Category.PROJECT_RUST: CategoryConfig("01_Build/Systems", 10),
        Category.PROJECT_GO: CategoryConfig("01_Build/Systems", 10),
        Category.PROJECT_JAVA: CategoryConfig("01_Build/Enterprise", 10),
        Category.DOC_PDF: CategoryConfig("03_Library/Documents", 5),
        Category.DOC_OFFICE: CategoryConfig("03_Library/Documents", 5),
        Category.DOC_TEXT: CategoryConfig("03_Library/Notes", 5),
        Category.MEDIA_VIDEO: CategoryConfig("05_Stage/Media/Videos", 5),
        Category.MEDIA_AUDIO: CategoryConfig("05_Stage/Media/Audio", 5),
        Category.MEDIA_IMAGE: CategoryConfig("05_Stage/Media/Images", 5),
        Category.ARCHIVE_COMPRESSED: CategoryConfig("00_Inbox/Archives", 5),
        Category.SDK_DOTNET: CategoryConfig("02_Studio/SDKs", 8),
        Category.CONFIG_DOTFILE: CategoryConfig("02_Studio/Config", 8),
        Category.TOOL_EXECUTABLE: CategoryConfig("02_Studio/Tools", 7),
        Category.PRIVATE_FINANCIAL: CategoryConfig("04_Private/Financial", 9),
        Category.PRIVATE_LEGAL: CategoryConfig("04_Private/Legal", 9),
        Category.PRIVATE_MEDICAL: CategoryConfig("04_Private/Medical", 9),
        Category.PRIVATE_IDENTITY: CategoryConfig("04_Private/Identity", 9),
        Category.VACUUM_EMPTY: CategoryConfig(VACUUM_TARGET, 3),
        Category.VACUUM_TEMP: CategoryConfig(VACUUM_TARGET, 6),
        Category.ARCHIVE_STALE: CategoryConfig("99_Archives/2024", 4),
    }
)


def get_category_config(category: Union[Category, str]) -> CategoryConfig:
    """
    Look up the destination and priority of a category.

    Args:
        category: Category member or its string value

    Returns:
        Category configuration

    Raises:
        LookupError: If the identifier is not a known category
    """
    try:
        return CATEGORY_TABLE[Category(category)]
    except ValueError as e:
        raise LookupError(f"Unknown category: {category!r}") from e


class ClassificationResult(BaseModel):
    """Outcome of classifying a single node."""

    model_config = ConfigDict(frozen=True)

    category: Category
    target_path: str
    priority: int
    reason: str

    @classmethod
    def for_category(cls, category: Category, reason: str) -> "ClassificationResult":
        config = get_category_config(category)
        return cls(
            category=category,
            target_path=config.target_path,
            priority=config.priority,
            reason=reason,
        )

    @property
    def is_vacuum(self) -> bool:
        return self.target_path == VACUUM_TARGET
